import logging
from typing import Dict, List

from .lexicon import (
    ACTIONS,
    ADJECTIVES,
    BRIDGE_QUESTIONS,
    FALLBACKS,
    HOOKS,
    IMAGERY,
    LINE_PATTERNS,
    NOUNS,
    SECTION_ORDERS,
)
from .rng import Rng, pick, rand_int

logger = logging.getLogger(__name__)


def _one_line(value: str) -> str:
    return " ".join((value or "").split())


def _slot_values(genre: str, duration: str, prompt: str) -> Dict[str, str]:
    # Slots land inside single-line templates, so embedded newlines are collapsed.
    return {
        "genre": _one_line(genre) or FALLBACKS["genre"],
        "duration": _one_line(duration) or FALLBACKS["duration"],
        "prompt": _one_line(prompt) or FALLBACKS["prompt"],
    }


def _fill(rng: Rng, template: str, slots: Dict[str, str]) -> str:
    # Draw order is fixed regardless of which placeholders the template uses.
    values = dict(slots)
    values["adjective"] = pick(rng, ADJECTIVES).lower()
    values["noun"] = pick(rng, NOUNS).lower()
    values["imagery"] = pick(rng, IMAGERY)
    values["action"] = pick(rng, ACTIONS)
    return template.format(**values)


def _capitalize(line: str) -> str:
    return line[:1].upper() + line[1:]


def _chorus(rng: Rng, hook: str) -> List[str]:
    return [hook] * rand_int(rng, 4, 6)


def _bridge(rng: Rng, slots: Dict[str, str]) -> List[str]:
    return [
        _fill(rng, pick(rng, BRIDGE_QUESTIONS), slots),
        pick(rng, IMAGERY),
        f"Maybe {slots['prompt']} is all we need",
        _capitalize(pick(rng, ACTIONS)),
    ]


def _free_lines(rng: Rng, slots: Dict[str, str]) -> List[str]:
    return [_capitalize(_fill(rng, pick(rng, LINE_PATTERNS), slots)) for _ in range(rand_int(rng, 4, 6))]


def generate_title(rng: Rng, prompt: str = "") -> str:
    adjective = pick(rng, ADJECTIVES)
    noun = pick(rng, NOUNS)
    words = (prompt or "").split()
    if words:
        return f"{adjective} {noun} {_capitalize(words[0])}"
    return f"{adjective} {noun}"


def generate_lyrics(rng: Rng, genre: str = "", duration: str = "", prompt: str = "") -> str:
    """Assemble a full lyric sheet from one rng.

    Sections are rendered as a ``[Label]`` line followed by their lines, with
    a blank line between sections. The chorus hook is chosen once per song so
    every chorus repeats the same line.
    """
    slots = _slot_values(genre, duration, prompt)
    order = pick(rng, SECTION_ORDERS)
    hook = _capitalize(_fill(rng, pick(rng, HOOKS), slots))

    blocks: List[str] = []
    for section in order:
        if section == "Chorus":
            lines = _chorus(rng, hook)
        elif section == "Bridge":
            lines = _bridge(rng, slots)
        else:
            lines = _free_lines(rng, slots)
        blocks.append("\n".join([f"[{section}]"] + lines))

    logger.debug(f"assembled lyrics with sections {'/'.join(order)}")
    return "\n\n".join(blocks)
