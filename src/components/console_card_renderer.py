"""
Console card renderer

Terminal stand-in for the web overlay: prints one line per state change and
the card contents when an entry appears.
"""

from typing import Any, Dict, List, Optional

from components.render_adapter import IRenderAdapter
from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO, CardSnapshotDTO
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.RENDER)

# Item types that cannot be "used" generically
NON_USABLE_TYPES = ("knowledge", "status effect", "vehicle")

STATE_SYMBOLS = {
    "APPEARING": "▲",
    "VISIBLE": "■",
    "DISAPPEARING": "▼",
    "IDLE": "·",
}


class ConsoleCardRenderer(IRenderAdapter):
    """Renders animator snapshots through the project logger"""

    def __init__(self, show_idle: bool = False):
        self.show_idle = show_idle
        self._last_state: Optional[str] = None
        self.frames_rendered = 0

    def render(self, snapshot: AnimatorSnapshotDTO) -> None:
        self.frames_rendered += 1
        if snapshot.state == self._last_state:
            return
        self._last_state = snapshot.state

        if snapshot.state == "IDLE":
            if self.show_idle:
                log.info(f"{STATE_SYMBOLS['IDLE']} overlay hidden", queued=snapshot.queue_size)
            return

        symbol = STATE_SYMBOLS.get(snapshot.state, "?")
        for card in snapshot.cards:
            if snapshot.state == "APPEARING":
                log.info(f"{symbol} {card.role.lower()} card", details=self.card_lines(card))
            else:
                log.info(
                    f"{symbol} {card.item['name']}",
                    classes=" ".join(card.css_classes),
                    queued=snapshot.queue_size,
                )

    @staticmethod
    def card_lines(card: CardSnapshotDTO) -> List[str]:
        """Text version of the card face: header, name, text, buttons"""
        item: Dict[str, Any] = card.item
        header = item["type"] + ("  [Active]" if item.get("isActive") else "")
        lines = [header, item["name"], item.get("displayDescription") or ""]
        if item.get("isJunk"):
            lines.append("(Marked as junk)")

        buttons = [ku["actionName"] for ku in item.get("knownUses", [])]
        buttons.append("Inspect")
        if item["type"] not in NON_USABLE_TYPES:
            buttons.append("Attempt to Use (Generic)")
        if item["type"] == "vehicle":
            buttons.append(f"Exit {item['name']}" if item.get("isActive") else f"Enter {item['name']}")
        lines.append(" | ".join(f"[{b}]" for b in buttons))
        return lines
