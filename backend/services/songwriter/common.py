MIN_SONGS = 1
MAX_SONGS = 10
DEFAULT_SONGS = 4

DEFAULT_GENRE = "pop"
DEFAULT_DURATION = "2:30"
DEFAULT_PROMPT = ""

# Candidates tried per requested song before duplicates are accepted.
MAX_ATTEMPTS_PER_SONG = 10
SIGNATURE_PREFIX_CHARS = 80

MIN_BPM = 60
MAX_BPM = 200
DEFAULT_BPM = 100
MIN_BARS = 4
BEATS_PER_BAR = 4
