"""In-memory UI gateway.

Records what would be shown to each player. Used as the default gateway
and by tests to observe surfaces and chat.
"""

from __future__ import annotations

from collections import defaultdict
from uuid import UUID

from chestshops.adapters.models import Message
from chestshops.adapters.protocol import Surface
from chestshops.core.identity import BlockPos


class LocalUIGateway:
    """UI gateway that keeps open surfaces and messages in dicts."""

    def __init__(self) -> None:
        self.open_surfaces: dict[UUID, Surface] = {}
        self.native_containers: dict[UUID, BlockPos] = {}
        self.messages: defaultdict[UUID, list[Message]] = defaultdict(list)
        self.refresh_count: defaultdict[UUID, int] = defaultdict(int)

    def open_surface(self, surface: Surface) -> None:
        self.native_containers.pop(surface.player_id, None)
        self.open_surfaces[surface.player_id] = surface

    def refresh(self, surface: Surface) -> None:
        if self.open_surfaces.get(surface.player_id) is surface:
            self.refresh_count[surface.player_id] += 1

    def close_surface(self, player_id: UUID) -> None:
        self.open_surfaces.pop(player_id, None)

    def open_container(self, player_id: UUID, pos: BlockPos) -> None:
        self.open_surfaces.pop(player_id, None)
        self.native_containers[player_id] = pos

    def send_message(self, player_id: UUID, message: Message) -> None:
        self.messages[player_id].append(message)

    def texts(self, player_id: UUID) -> list[str]:
        """Plain text of every message sent to a player, oldest first."""
        return [message.text for message in self.messages[player_id]]

    def last_text(self, player_id: UUID) -> str | None:
        sent = self.messages[player_id]
        return sent[-1].text if sent else None
