"""
MIDI export tests - strummed chords and progressions.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_chords.compiler.midi import (
    GUITAR_PROGRAM,
    TICKS_PER_BEAT,
    MidiEvent,
    close_position_pitches,
    events_to_midi,
    progression_to_midi,
    strum_events,
)


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)
        assert event.pitch == 60
        assert event.channel == 0

    def test_event_validation(self) -> None:
        """Out-of-range fields are rejected."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=-1)
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)
        with pytest.raises(ValueError, match="Start ticks"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480, velocity=100)


class TestStrumEvents:
    """Test strumming a single chord."""

    def test_onsets_staggered(self) -> None:
        """Strings start a strum interval apart, low string first."""
        events = strum_events([48, 52, 55], start_ticks=0, duration_ticks=1920, strum_ticks=30)
        assert [e.pitch for e in events] == [48, 52, 55]
        assert [e.start_ticks for e in events] == [0, 30, 60]

    def test_notes_end_together(self) -> None:
        events = strum_events([48, 52, 55], start_ticks=960, duration_ticks=480)
        assert {e.start_ticks + e.duration_ticks for e in events} == {1440}

    def test_onset_clamped_to_end(self) -> None:
        """A strum longer than the chord never runs past its end."""
        events = strum_events([40, 45, 50, 55], start_ticks=0, duration_ticks=50, strum_ticks=30)
        assert [e.start_ticks for e in events] == [0, 30, 50, 50]
        assert events[-1].duration_ticks == 0


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_program_and_tempo(self) -> None:
        """Track starts with tempo and the guitar program."""
        mid = events_to_midi([], tempo_bpm=120)
        track = mid.tracks[0]
        assert track[0].type == "set_tempo"
        assert track[0].tempo == 500_000
        assert track[1].type == "program_change"
        assert track[1].program == GUITAR_PROGRAM

    def test_note_off_before_note_on(self) -> None:
        """Back-to-back notes release before the next attack."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
            MidiEvent(pitch=62, start_ticks=480, duration_ticks=480, velocity=100),
        ]
        notes = [m for m in events_to_midi(events).tracks[0] if m.type in ("note_on", "note_off")]
        assert [(m.type, m.note, m.time) for m in notes] == [
            ("note_on", 60, 0),
            ("note_off", 60, 480),
            ("note_on", 62, 0),
            ("note_off", 62, 480),
        ]


class TestProgressionToMidi:
    """Test rendering a progression."""

    def test_chord_timing(self) -> None:
        """Each chord starts on its own bar."""
        mid = progression_to_midi([[48, 52, 55], [43, 47, 50]], beats_per_chord=4)

        now = 0
        starts = []
        for msg in mid.tracks[0]:
            now += msg.time
            if msg.type == "note_on":
                starts.append((now, msg.note))

        bar = 4 * TICKS_PER_BEAT
        assert starts == [
            (0, 48),
            (30, 52),
            (60, 55),
            (bar, 43),
            (bar + 30, 47),
            (bar + 60, 50),
        ]

    def test_deterministic(self) -> None:
        chords = [[48, 52, 55, 60, 64]]
        first = [str(m) for m in progression_to_midi(chords).tracks[0]]
        second = [str(m) for m in progression_to_midi(chords).tracks[0]]
        assert first == second

    def test_empty_progression(self) -> None:
        with pytest.raises(ValueError, match="at least one chord"):
            progression_to_midi([])

    def test_can_save_and_reload(self, temp_midi_path: Path) -> None:
        """MIDI file can be saved and reloaded."""
        mid = progression_to_midi([[48, 52, 55]], tempo_bpm=100)
        mid.save(str(temp_midi_path))

        assert temp_midi_path.exists()
        loaded = MidiFile(str(temp_midi_path))
        assert loaded.ticks_per_beat == TICKS_PER_BEAT
        assert len([m for m in loaded.tracks[0] if m.type == "note_on"]) == 3


class TestClosePosition:
    """Test stacking chord tones for uncataloged chords."""

    def test_major_triad(self) -> None:
        assert close_position_pitches([0, 4, 7]) == [48, 52, 55]

    def test_wraps_upward(self) -> None:
        """Tones below the previous one move up an octave."""
        assert close_position_pitches([9, 0, 4]) == [57, 60, 64]

    def test_octave(self) -> None:
        assert close_position_pitches([7, 11, 2], octave=2) == [43, 47, 50]
