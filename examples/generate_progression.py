#!/usr/bin/env python3
"""
Example: Look up a progression and export it to MIDI.

Walks a I-vi-IV-V in C through the chord engine: spells each chord,
picks the easiest cataloged voicing, prints its fingering and inversion,
then writes the progression as strummed guitar chords.

Usage:
    python examples/generate_progression.py
    # Creates: examples/output/pop_progression.mid
"""

from pathlib import Path

from chuk_mcp_chords.compiler.midi import progression_to_midi
from chuk_mcp_chords.constants import SelectionStatus
from chuk_mcp_chords.engine import ChordEngine


def main() -> None:
    """Print voicings and suggestions, then export the progression."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    engine = ChordEngine()
    progression = [
        engine.suggest_relative_chord("C", numeral, "Same") for numeral in ["I", "vi", "IV", "V"]
    ]
    print(f"Progression: {' - '.join(progression)}\n")

    pitches = []
    for name in progression:
        root, quality = name.split(" ", 1)
        chord = engine.resolve_chord(root, quality)
        print(f"{name}: {' '.join(chord.notes)} ({chord.formula})")

        selection = engine.list_voicings(root, quality, sort="difficulty")
        if selection.status is not SelectionStatus.FOUND:
            print("  no cataloged voicing, using close position")
            pitches.append(engine.playback_pitches(root, quality))
            continue

        easiest = selection.voicings[0]
        fingers = " ".join("-" if f is None else str(f) for f in easiest.fingering.fingers)
        print(f"  {easiest.voicing}  fingers {fingers}")
        print(f"  {easiest.attributes.difficulty}, {easiest.attributes.inversion}")
        pitches.append(engine.playback_pitches(root, quality, easiest.voicing))

    print("\nWhat could follow G Major in a blues?")
    result = engine.suggest_all_for_style("G", "Major", "Blues")
    for chord in result.chords:
        marker = "" if chord.has_voicings else " (no shapes)"
        print(f"  {chord.numeral:>5}  {chord.name}{marker}")

    mid = progression_to_midi(pitches, tempo_bpm=96)
    path = output_dir / "pop_progression.mid"
    mid.save(str(path))
    print(f"\nCreated: {path}")


if __name__ == "__main__":
    main()
