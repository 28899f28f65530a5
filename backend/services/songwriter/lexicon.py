from typing import Dict, List, Tuple

ADJECTIVES: Tuple[str, ...] = (
    "Midnight",
    "Neon",
    "Golden",
    "Velvet",
    "Electric",
    "Silent",
    "Endless",
    "Crimson",
    "Flicker",
    "Silver",
    "Paper",
    "Static",
    "Wild",
    "Hollow",
)

NOUNS: Tuple[str, ...] = (
    "Dreams",
    "Echoes",
    "Lights",
    "Streets",
    "Shadows",
    "Skies",
    "Horizons",
    "Rhythms",
    "Heartbeat",
    "Whispers",
    "Airplanes",
    "Starlight",
    "Wires",
    "Waves",
)

IMAGERY: Tuple[str, ...] = (
    "Streetlights hum like a slow guitar",
    "Rain writes our names across the glass",
    "The skyline flickers, counting every star",
    "Paper airplanes drifting through the haze",
    "Neon rivers running through the dark",
    "Static and starlight on the radio",
    "Footsteps echo down an empty hall",
    "Golden dust is falling from the sun",
)

ACTIONS: Tuple[str, ...] = (
    "we chase another night",
    "we dance until the dawn",
    "we run and never look back",
    "we hold on to the sound",
    "we sing it out loud",
    "we light the whole town up",
    "we drift where the rivers go",
    "we break the silence down",
)

HOOKS: Tuple[str, ...] = (
    "Hold on, hold tight, through the {noun} tonight",
    "{prompt}, hearts alight",
    "We are the {noun}, we are the {adjective} sound",
    "Turn it up, let the {genre} carry us home",
    "Oh-oh, {adjective} {noun}, don't let go",
    "Say it again, {prompt}, say it again",
)

BRIDGE_QUESTIONS: Tuple[str, ...] = (
    "Where do the {noun} go when the music ends?",
    "Who will remember the {adjective} nights?",
    "Can you hear the {noun} calling back?",
    "What is left when the {adjective} lights fade?",
)

SECTION_ORDERS: Tuple[Tuple[str, ...], ...] = (
    ("Intro", "Verse", "Chorus", "Verse", "Chorus", "Outro"),
    ("Verse", "Chorus", "Verse", "Chorus", "Bridge", "Chorus"),
    ("Intro", "Verse", "Chorus", "Bridge", "Chorus", "Outro"),
    ("Verse", "Verse", "Chorus", "Bridge", "Chorus"),
)

# Verse, intro and outro lines pick one of these per line.
LINE_PATTERNS: Tuple[str, ...] = (
    "In the {genre} glow, {prompt}",
    "Counting down the time ({duration}) in the {noun}",
    "{imagery}, {action}",
)

FALLBACKS: Dict[str, str] = {
    "genre": "city",
    "duration": "no time at all",
    "prompt": "we go",
}

GENRES: List[dict] = [
    {"id": "pop", "name": "Pop", "description": "Bright hooks, big choruses"},
    {"id": "rock", "name": "Rock", "description": "Driving guitars, loud drums"},
    {"id": "hip_hop", "name": "Hip-Hop", "description": "Punchy beats, rhythmic verses"},
    {"id": "lo_fi", "name": "Lo-Fi", "description": "Chill, jazzy, vinyl crackle"},
    {"id": "edm", "name": "EDM", "description": "Synth leads, four-on-the-floor"},
    {"id": "country", "name": "Country", "description": "Storytelling, open roads"},
    {"id": "rnb", "name": "R&B", "description": "Smooth grooves, soulful vocals"},
    {"id": "indie", "name": "Indie", "description": "Dreamy, nostalgic, lo-key"},
]
