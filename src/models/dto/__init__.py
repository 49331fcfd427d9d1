"""Snapshot DTOs handed to render adapters"""

from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO, CardSnapshotDTO

__all__ = ["AnimatorSnapshotDTO", "CardSnapshotDTO"]
