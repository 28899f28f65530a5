from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Union

from services.songwriter.common import (
    DEFAULT_BPM, DEFAULT_DURATION, DEFAULT_GENRE, DEFAULT_PROMPT, DEFAULT_SONGS,
)
from services.songwriter.batch import clamp_count
from services.songwriter.lexicon import GENRES

# Generation Models
class SongRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")
    genre: str = Field(default=DEFAULT_GENRE, max_length=60)
    duration: str = Field(default=DEFAULT_DURATION, max_length=20)
    prompt: str = Field(default=DEFAULT_PROMPT, max_length=500)
    count: int = DEFAULT_SONGS
    seed: Optional[Union[str, int, float]] = None

    @field_validator("count")
    @classmethod
    def _clamp_count(cls, v: int) -> int:
        return clamp_count(v)

class Song(BaseModel):
    id: str
    title: str
    lyrics: str
    genre: str
    duration: str

class SongBatch(BaseModel):
    songs: List[Song]
    seed: str
    hash_version: str

# Arrangement Models
class ArrangementRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")
    lyrics: str = Field(max_length=20000)
    seed: Union[str, int, float]
    bpm: float = DEFAULT_BPM
    include_cues: bool = False

class ArrangementEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    kind: str
    beat: float
    pitch: Optional[int] = None
    length_beats: Optional[float] = Field(default=None, alias="lengthBeats")

class PlaybackCue(BaseModel):
    kind: str
    start: float
    duration: float
    frequency: Optional[float] = None

class Arrangement(BaseModel):
    bpm: int
    bars: int
    events: List[ArrangementEvent]
    cues: Optional[List[PlaybackCue]] = None
    total_seconds: Optional[float] = None

class GenreResponse(BaseModel):
    genres: List[dict] = Field(default_factory=lambda: list(GENRES))
