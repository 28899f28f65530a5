import logging
import time
from typing import Dict, Optional

from services.songwriter.arrangement import build_arrangement
from services.songwriter.batch import derive_seed, generate_songs
from services.songwriter.playback import PlaybackSession
from services.songwriter.rng import HASH_VERSION, seed_to_text

logger = logging.getLogger(__name__)


def generate_song_batch(
    genre: str,
    duration: str,
    prompt: str,
    count: int,
    seed: Optional[object] = None,
) -> Dict:
    """Generate a batch of songs for one request.

    Without a caller-supplied seed the batch is salted with the current time,
    so repeated requests return fresh songs. The effective seed is returned so
    the batch can be replayed.
    """
    try:
        if seed is None or seed == "":
            seed = derive_seed(genre, duration, prompt, salt=time.time_ns())
        seed_text = seed_to_text(seed)
        songs = generate_songs(seed_text, genre=genre, duration=duration, prompt=prompt, count=count)
        return {
            "success": True,
            "seed": seed_text,
            "hash_version": HASH_VERSION,
            "songs": [s.to_dict() for s in songs],
        }
    except Exception as e:
        logger.exception(f"Song generation failed: {e}")
        return {"success": False, "error": str(e)}


def generate_arrangement(lyrics: str, seed: object, bpm: int, include_cues: bool = False) -> Dict:
    try:
        arrangement = build_arrangement(lyrics, seed, bpm)
        result = {"success": True, **arrangement.to_dict()}
        if include_cues:
            session = PlaybackSession(arrangement)
            result["cues"] = session.to_list()
            result["total_seconds"] = round(session.total_seconds, 3)
            session.stop()
        logger.info(f"Arrangement built: {len(arrangement.events)} events over {arrangement.bars} bars")
        return result
    except Exception as e:
        logger.exception(f"Arrangement failed: {e}")
        return {"success": False, "error": str(e)}
