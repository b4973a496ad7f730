"""
Octave and velocity keys: shifting the octave while a note is held, stepping the octave against its upper limit,
and stepping the velocity down from full.
"""

from musical_keyboard import MusicalKeyboard, Key


def octave_shift_while_held():
    keyboard = MusicalKeyboard(2, 1.0)
    note_on = keyboard.key_pressed(Key.A)
    octave_up = keyboard.key_pressed(Key.X)
    octave_after_shift = keyboard.octave
    note_off = keyboard.key_released(Key.A)
    return [note_on, octave_up, octave_after_shift, note_off]


def octave_at_top():
    keyboard = MusicalKeyboard(12, 1.0)
    results = [keyboard.key_pressed(Key.X) for _ in range(12)]
    return [results.count(None), keyboard.octave]


def velocity_steps():
    keyboard = MusicalKeyboard(2, 1.0)
    velocity_up = keyboard.key_pressed(Key.V)
    velocity_after_up = keyboard.velocity
    velocity_down = keyboard.key_pressed(Key.C)
    velocity_after_down = keyboard.velocity
    return [velocity_up, velocity_after_up, velocity_down, velocity_after_down, keyboard.key_pressed(Key.A)]


def test_results():
    return octave_shift_while_held() + octave_at_top() + velocity_steps()
