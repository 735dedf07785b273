from dataclasses import dataclass

from config.defaults import ROOM_NUMBER_FLOOR_MULTIPLIER


@dataclass(frozen=True)
class Room:
    floor: int  # 1..10
    pos: int    # 0 is nearest to the stairs/lift

    @property
    def num(self) -> int:
        """Display number: 101..110 on floor 1, 1001..1007 on floor 10."""
        return self.floor * ROOM_NUMBER_FLOOR_MULTIPLIER + self.pos + 1

    @property
    def room_id(self) -> str:
        return str(self.num)
