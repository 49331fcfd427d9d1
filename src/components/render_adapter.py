from typing import Protocol

from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO


class IRenderAdapter(Protocol):
    """
    Paints the animator overlay.

    Implementations:
    - receive one snapshot per applied transition
    - never call back into the animator except through skip_all()
    """

    def render(self, snapshot: AnimatorSnapshotDTO) -> None:
        ...
