import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .common import BEATS_PER_BAR, DEFAULT_BPM, MAX_BPM, MIN_BARS, MIN_BPM
from .rng import Seed, make_rng, pick, seed_to_text

# Semitone offsets from the A3 reference, two octaves of major pentatonic.
LEAD_SCALE = (0, 2, 4, 7, 9, 12, 14, 16, 19, 21)
PROGRESSIONS = (
    (0, 7, 9, 5),   # I-V-vi-IV
    (0, 5, 7, 5),   # I-IV-V-IV
    (9, 5, 0, 7),   # vi-IV-I-V
    (0, 9, 5, 7),   # I-vi-IV-V
)
LEAD_STEP = 0.5
CHORD_LENGTH = float(BEATS_PER_BAR)

_LABEL_LINE = re.compile(r"^\s*\[[^\]]*\]\s*$")
_WORD = re.compile(r"[\w']+")

PERCUSSION = ("kick", "snare", "hat")
PITCHED = ("bass", "chord", "lead")


@dataclass
class ArrangementEvent:
    kind: str
    beat: float
    pitch: Optional[int] = None
    length_beats: Optional[float] = None

    def to_dict(self) -> Dict:
        data: Dict = {"kind": self.kind, "beat": self.beat}
        if self.kind in PITCHED:
            data["pitch"] = self.pitch
            data["lengthBeats"] = self.length_beats
        return data


@dataclass
class Arrangement:
    bpm: int
    bars: int
    events: List[ArrangementEvent] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "bpm": self.bpm,
            "bars": self.bars,
            "events": [e.to_dict() for e in self.events],
        }


def safe_bpm(value, fallback: int = DEFAULT_BPM) -> int:
    try:
        bpm = int(round(float(value)))
    except Exception:
        return fallback
    return max(MIN_BPM, min(MAX_BPM, bpm))


def lyric_words(lyrics: str) -> List[str]:
    words: List[str] = []
    for line in (lyrics or "").splitlines():
        if _LABEL_LINE.match(line):
            continue
        words.extend(_WORD.findall(line))
    return words


def _backing_bar(bar: int, root: int) -> List[ArrangementEvent]:
    start = float(bar * BEATS_PER_BAR)
    events = [
        ArrangementEvent("kick", start),
        ArrangementEvent("kick", start + 2),
        ArrangementEvent("snare", start + 1),
        ArrangementEvent("snare", start + 3),
    ]
    for step in range(BEATS_PER_BAR * 2):
        events.append(ArrangementEvent("hat", start + step * 0.5))
    events.append(ArrangementEvent("bass", start, pitch=root - 12, length_beats=CHORD_LENGTH))
    events.append(ArrangementEvent("chord", start, pitch=root, length_beats=CHORD_LENGTH))
    return events


def build_arrangement(lyrics: str, seed: Seed, bpm=DEFAULT_BPM) -> Arrangement:
    """Derive a playback arrangement from lyrics and a seed.

    One eighth-note lead event per lyric word, followed by a fixed backing
    pattern covering at least ``MIN_BARS`` bars. Events are grouped by layer,
    not sorted by beat.
    """
    rng = make_rng(f"{seed_to_text(seed)}|arrangement")
    progression = pick(rng, PROGRESSIONS)

    events: List[ArrangementEvent] = []
    words = lyric_words(lyrics)
    for i, _word in enumerate(words):
        events.append(ArrangementEvent("lead", i * LEAD_STEP, pitch=pick(rng, LEAD_SCALE), length_beats=LEAD_STEP))

    lead_beats = len(words) * LEAD_STEP
    bars = max(MIN_BARS, int(math.ceil(lead_beats / BEATS_PER_BAR)))
    for bar in range(bars):
        events.extend(_backing_bar(bar, progression[bar % len(progression)]))

    return Arrangement(bpm=safe_bpm(bpm), bars=bars, events=events)
