import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from services.songwriter.arrangement import build_arrangement
from services.songwriter.batch import derive_seed, generate_songs
from services.songwriter.common import DEFAULT_BPM, DEFAULT_DURATION, DEFAULT_GENRE, DEFAULT_SONGS
from services.songwriter.playback import PlaybackSession


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a batch of generated songs as JSON.")
    parser.add_argument("--genre", default=DEFAULT_GENRE)
    parser.add_argument("--duration", default=DEFAULT_DURATION)
    parser.add_argument("--prompt", default="")
    parser.add_argument("--count", type=int, default=DEFAULT_SONGS, help="Clamped to 1-10")
    parser.add_argument(
        "--seed",
        default=None,
        help="Seed string (default: derived from genre|duration|prompt)",
    )
    parser.add_argument("--arrangement", action="store_true", help="Include the first song's arrangement and cues.")
    parser.add_argument("--bpm", type=int, default=DEFAULT_BPM)
    parser.add_argument("--until", type=float, default=None, help="Only print cues starting within this many seconds.")
    args = parser.parse_args()

    seed = args.seed if args.seed else derive_seed(args.genre, args.duration, args.prompt)
    songs = generate_songs(seed, genre=args.genre, duration=args.duration, prompt=args.prompt, count=args.count)
    output = {"seed": seed, "songs": [s.to_dict() for s in songs]}

    if args.arrangement:
        arrangement = build_arrangement(songs[0].lyrics, seed, args.bpm)
        session = PlaybackSession(arrangement)
        output["arrangement"] = arrangement.to_dict()
        cues = session.due(args.until) if args.until is not None else session.cues
        output["cues"] = [asdict(c) for c in cues]
        session.stop()

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
