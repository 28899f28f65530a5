import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from .arrangement import Arrangement
from .common import BEATS_PER_BAR

logger = logging.getLogger(__name__)

REFERENCE_HZ = 220.0


def pitch_to_hz(pitch: int) -> float:
    return REFERENCE_HZ * 2 ** (pitch / 12.0)


@dataclass
class PlaybackCue:
    kind: str
    start: float
    duration: float
    frequency: Optional[float] = None


class PlaybackSession:
    """Cue sheet for one play action.

    Each session owns its cues; nothing is shared between sessions, so a
    stopped session can be discarded without affecting another one.
    """

    PERCUSSION_SECONDS = 0.1

    def __init__(self, arrangement: Arrangement, start_offset: float = 0.05):
        self.arrangement = arrangement
        self.start_offset = start_offset
        self.seconds_per_beat = 60.0 / float(arrangement.bpm)
        self.active = True
        self.cues: List[PlaybackCue] = [self._cue(e) for e in arrangement.events]

    def _cue(self, event) -> PlaybackCue:
        start = round(self.start_offset + event.beat * self.seconds_per_beat, 6)
        if event.length_beats is None:
            return PlaybackCue(event.kind, start, self.PERCUSSION_SECONDS)
        return PlaybackCue(
            event.kind,
            start,
            round(event.length_beats * self.seconds_per_beat, 6),
            round(pitch_to_hz(event.pitch), 3),
        )

    @property
    def total_seconds(self) -> float:
        return self.start_offset + self.arrangement.bars * BEATS_PER_BAR * self.seconds_per_beat

    def due(self, elapsed: float) -> List[PlaybackCue]:
        """Cues whose start time is at or before ``elapsed`` seconds."""
        if not self.active:
            return []
        return [c for c in self.cues if c.start <= elapsed]

    def stop(self) -> None:
        if self.active:
            logger.debug(f"stopping playback session with {len(self.cues)} cues")
        self.cues = []
        self.active = False

    def to_list(self) -> List[Dict]:
        return [asdict(c) for c in self.cues]
