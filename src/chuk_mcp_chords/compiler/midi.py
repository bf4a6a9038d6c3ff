"""
MIDI export - chords and progressions as strummed guitar parts.

A chord is a list of MIDI pitches, low string first. Each chord is
strummed low to high by offsetting note starts a few ticks apart. All
operations are deterministic: same input, same MIDI file.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_chords.constants import ErrorMessages

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# GM program 25 = Acoustic Guitar (steel), 0-indexed
GUITAR_PROGRAM = 25

# Delay between strings in a strum
DEFAULT_STRUM_TICKS = 30


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks, absolute from the start of the track.
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def strum_events(
    pitches: Sequence[int],
    start_ticks: int,
    duration_ticks: int,
    velocity: int = 90,
    strum_ticks: int = DEFAULT_STRUM_TICKS,
) -> list[MidiEvent]:
    """
    Events for one strummed chord.

    Every note ends together at ``start_ticks + duration_ticks``, so later
    strings in the strum ring slightly shorter.
    """
    end = start_ticks + duration_ticks
    events = []
    for i, pitch in enumerate(pitches):
        onset = min(start_ticks + i * strum_ticks, end)
        events.append(
            MidiEvent(
                pitch=pitch,
                start_ticks=onset,
                duration_ticks=end - onset,
                velocity=velocity,
            )
        )
    return events


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 90,
    ticks_per_beat: int = TICKS_PER_BEAT,
    program: int = GUITAR_PROGRAM,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Note events
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        program: GM program for channel 0

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))
    track.append(Message("program_change", channel=0, program=program, time=0))

    timeline: list[tuple[int, Message]] = []
    for event in events:
        timeline.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                ),
            )
        )
        timeline.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
            )
        )

    # note_off before note_on at the same tick
    timeline.sort(key=lambda item: (item[0], item[1].type != "note_off"))

    now = 0
    for tick, msg in timeline:
        track.append(msg.copy(time=tick - now))
        now = tick

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def progression_to_midi(
    chords: Sequence[Sequence[int]],
    tempo_bpm: int = 90,
    beats_per_chord: int = 4,
    velocity: int = 90,
    strum_ticks: int = DEFAULT_STRUM_TICKS,
) -> MidiFile:
    """
    Render a chord progression, one strum per chord.

    Args:
        chords: MIDI pitches of each chord, low string first
        tempo_bpm: Tempo in beats per minute
        beats_per_chord: Length of each chord in beats
        velocity: Note velocity (0-127)
        strum_ticks: Delay between strings in a strum

    Returns:
        A mido MidiFile held in memory

    Raises:
        ValueError: if the progression is empty
    """
    if not chords:
        raise ValueError(ErrorMessages.EMPTY_PROGRESSION)

    chord_ticks = beats_per_chord * TICKS_PER_BEAT
    events: list[MidiEvent] = []
    for i, pitches in enumerate(chords):
        events.extend(
            strum_events(
                pitches,
                start_ticks=i * chord_ticks,
                duration_ticks=chord_ticks,
                velocity=velocity,
                strum_ticks=strum_ticks,
            )
        )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def close_position_pitches(pitch_classes: Sequence[int], octave: int = 3) -> list[int]:
    """
    Stack pitch classes upward from the first one, in close position.

    Used for chords with no cataloged voicing.
    """
    pitches: list[int] = []
    for pitch_class in pitch_classes:
        pitch = (octave + 1) * 12 + pitch_class
        while pitches and pitch <= pitches[-1]:
            pitch += 12
        pitches.append(pitch)
    return pitches
