from models.domain.item import KnownUse, items_equivalent
from models.enums import ItemType


def test_identical_snapshots_are_equivalent(make_item):
    assert items_equivalent(make_item(), make_item())


def test_none_only_matches_none(make_item):
    assert items_equivalent(None, None)
    assert not items_equivalent(make_item(), None)
    assert not items_equivalent(None, make_item())


def test_name_type_and_description_matter(make_item):
    base = make_item()
    assert not items_equivalent(base, make_item(name="Lantern"))
    assert not items_equivalent(base, make_item(type=ItemType.WEAPON))
    assert not items_equivalent(base, make_item(description="A charred torch."))


def test_active_flag_matters(make_item):
    assert not items_equivalent(make_item(is_active=False), make_item(is_active=True))


def test_missing_active_description_equals_empty(make_item):
    assert items_equivalent(make_item(active_description=None), make_item(active_description=""))
    assert not items_equivalent(make_item(active_description=None), make_item(active_description="Lit."))


def test_junk_tag_matters_other_tags_do_not(make_item):
    assert not items_equivalent(make_item(tags=()), make_item(tags=("junk",)))
    assert items_equivalent(make_item(tags=("debuff",)), make_item(tags=()))


def test_known_uses_compared_as_multiset(make_item):
    first = make_item(known_uses=["Light", "Throw"])
    reordered = make_item(known_uses=["Throw", "Light"])
    assert items_equivalent(first, reordered)


def test_known_use_duplicates_count(make_item):
    assert not items_equivalent(
        make_item(known_uses=["Light", "Light", "Throw"]),
        make_item(known_uses=["Light", "Throw", "Throw"]),
    )


def test_known_use_fields_matter(make_item):
    plain = make_item(known_uses=[KnownUse("Light")])
    active_only = make_item(known_uses=[KnownUse("Light", applies_when_active=True)])
    described = make_item(known_uses=[KnownUse("Light", description="Sets it on fire")])
    assert not items_equivalent(plain, active_only)
    assert not items_equivalent(plain, described)


def test_display_description_prefers_active_text(make_item):
    item = make_item(active_description="The torch burns.", is_active=True)
    assert item.display_description == "The torch burns."
    assert make_item(active_description="The torch burns.").display_description == "A wooden torch."
    assert make_item(active_description="", is_active=True).display_description == "A wooden torch."
