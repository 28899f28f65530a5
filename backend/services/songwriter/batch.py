import logging
import time
import uuid
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Set, Tuple

from .common import (
    DEFAULT_DURATION,
    DEFAULT_GENRE,
    DEFAULT_PROMPT,
    DEFAULT_SONGS,
    MAX_ATTEMPTS_PER_SONG,
    MAX_SONGS,
    MIN_SONGS,
    SIGNATURE_PREFIX_CHARS,
)
from .lyrics import generate_lyrics, generate_title
from .rng import Seed, make_rng, seed_to_text

logger = logging.getLogger(__name__)


@dataclass
class Song:
    """A generated song as returned to clients."""
    id: str
    title: str
    lyrics: str
    genre: str
    duration: str

    @property
    def signature(self) -> Tuple[str, str]:
        return self.title, self.lyrics[:SIGNATURE_PREFIX_CHARS]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def clamp_count(value, fallback: int = DEFAULT_SONGS) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(MIN_SONGS, min(MAX_SONGS, count))


def derive_seed(genre: str, duration: str, prompt: str, salt: Optional[object] = None) -> str:
    base = f"{genre}|{duration}|{prompt}"
    if salt is None:
        return base
    return f"{base}|{salt}"


def _song_id(index: int) -> str:
    return f"{int(time.time() * 1000)}-{index}-{uuid.uuid4().hex[:6]}"


def compose_song(
    seed: Seed,
    index: int = 0,
    genre: str = DEFAULT_GENRE,
    duration: str = DEFAULT_DURATION,
    prompt: str = DEFAULT_PROMPT,
    position: Optional[int] = None,
) -> Song:
    """Compose candidate ``index``; ``position`` is its slot in the batch when known."""
    rng = make_rng(f"{seed_to_text(seed)}#{index}")
    title = generate_title(rng, prompt)
    lyrics = generate_lyrics(rng, genre=genre, duration=duration, prompt=prompt)
    song_id = _song_id(index if position is None else position)
    return Song(id=song_id, title=title, lyrics=lyrics, genre=genre, duration=duration)


def generate_songs(
    seed: Seed,
    genre: str = DEFAULT_GENRE,
    duration: str = DEFAULT_DURATION,
    prompt: str = DEFAULT_PROMPT,
    count: int = DEFAULT_SONGS,
) -> List[Song]:
    """Generate a batch of ``count`` songs, all reproducible from ``seed``.

    Candidate ``k`` is composed from its own rng seeded with ``"<seed>#<k>"``.
    Candidates whose title and lyric prefix match an accepted song are
    skipped until ``MAX_ATTEMPTS_PER_SONG * count`` attempts have been used;
    after that, duplicates are accepted so the batch always fills.
    """
    count = clamp_count(count)
    budget = MAX_ATTEMPTS_PER_SONG * count

    songs: List[Song] = []
    seen: Set[Tuple[str, str]] = set()
    attempt = 0
    while len(songs) < count:
        song = compose_song(seed, attempt, genre=genre, duration=duration, prompt=prompt, position=len(songs))
        attempt += 1
        if song.signature in seen and attempt <= budget:
            logger.debug(f"rejected duplicate candidate {attempt - 1}: {song.title}")
            continue
        if song.signature in seen:
            logger.warning(f"retry budget of {budget} exhausted, accepting duplicate '{song.title}'")
        seen.add(song.signature)
        songs.append(song)

    logger.info(f"generated {len(songs)} songs in {attempt} attempts (seed={seed_to_text(seed)!r})")
    return songs
