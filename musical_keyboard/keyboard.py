"""
Module containing the :class:`MusicalKeyboard` class, which turns computer keyboard presses and releases into
:class:`~musical_keyboard.events.NoteOn` and :class:`~musical_keyboard.events.NoteOff` events.
"""

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of musical_keyboard (computer keyboard to musical note event translation)   #
#  Copyright © 2026 the musical_keyboard developers.                                            #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

from .keys import Key
from .pitch import Letter, Octave, Velocity
from .events import NoteOn, NoteOff, NoteEvent
from .settings import keyboard_settings
from ._constants import MIN_OCTAVE, MAX_OCTAVE, MIN_VELOCITY, MAX_VELOCITY, VELOCITY_STEP
from typing import Optional, Tuple, Dict, List
import logging


# This key pattern models a piano's keys across two octaves, where Key.A is a piano's C. Each note key maps to an
# (octave offset, letter) pair, with the offset added to the keyboard's current base octave.
_key_to_octave_offset_and_letter = {
    Key.A:         (0, Letter.C),
    Key.W:         (0, Letter.Csh),
    Key.S:         (0, Letter.D),
    Key.E:         (0, Letter.Dsh),
    Key.D:         (0, Letter.E),
    Key.F:         (0, Letter.F),
    Key.T:         (0, Letter.Fsh),
    Key.G:         (0, Letter.G),
    Key.Y:         (0, Letter.Gsh),
    Key.H:         (0, Letter.A),
    Key.U:         (0, Letter.Ash),
    Key.J:         (0, Letter.B),
    Key.K:         (1, Letter.C),
    Key.O:         (1, Letter.Csh),
    Key.L:         (1, Letter.D),
    Key.P:         (1, Letter.Dsh),
    Key.Semicolon: (1, Letter.E),
    Key.Quote:     (1, Letter.F),
}


class MusicalKeyboard:

    """
    Creates musical notes from computer keyboard input. Feed it key presses and releases via :func:`key_pressed` and
    :func:`key_released`, and it returns the corresponding note events:

    - Z will step the octave down, and X will step it up.
    - C will step the velocity down, and V will step it up.
    - The home row and some of the top row will start notes when pressed and end them when released.

    Keys that are pressed again while already held (as happens with a window's key-repeat) are ignored, and each
    note-off carries the octave its note-on was sent with, even if the base octave was changed in the meantime.

    The keyboard does no locking of its own; if key events arrive from multiple threads, they should be serialized
    before reaching it (see :class:`~musical_keyboard.listener.KeyboardListener`).

    :param octave: the initial base octave. Defaults to :code:`keyboard_settings.default_octave` (factory default 2).
        Not validated; it should lie between -2 and 12.
    :param velocity: the initial velocity. Defaults to :code:`keyboard_settings.default_velocity` (factory default
        1.0). Not validated; it should lie between 0.0 and 1.0.
    :ivar octave: the current base octave for the keyboard
    :ivar velocity: the current velocity for the generated notes
    :ivar currently_pressed_keys: dictionary mapping each held note key to the octave of its note-on. Can be read
        (e.g. for display), but should not be altered directly.
    """

    def __init__(self, octave: Octave = None, velocity: Velocity = None):
        self.octave = keyboard_settings.default_octave if octave is None else octave
        self.velocity = keyboard_settings.default_velocity if velocity is None else velocity
        self.currently_pressed_keys: Dict[Key, Octave] = {}

    @classmethod
    def new(cls, octave: Octave, velocity: Velocity) -> 'MusicalKeyboard':
        """
        Constructs a keyboard with the given base octave and velocity.

        :param octave: the initial base octave
        :param velocity: the initial velocity
        """
        return cls(octave, velocity)

    @classmethod
    def default(cls) -> 'MusicalKeyboard':
        """Constructs a keyboard using the defaults in :code:`keyboard_settings`."""
        return cls()

    @property
    def pressed(self) -> Dict[Key, Octave]:
        """Alias for :attr:`currently_pressed_keys`."""
        return self.currently_pressed_keys

    @pressed.setter
    def pressed(self, value: Dict[Key, Octave]):
        self.currently_pressed_keys = value

    # ----------------------------------------------- Key Events ------------------------------------------------

    def key_pressed(self, key: Key) -> Optional[NoteOn]:
        """
        Responds to a key being pressed, returning a NoteOn if the key starts a note.

        :param key: the key that was pressed
        :return: a NoteOn, or None if the key was a modifier, was already held, or isn't a note key
        """
        if key is Key.Z:
            if self.octave > MIN_OCTAVE:
                self.octave -= 1
            else:
                logging.debug("Octave already at minimum of {}; ignoring octave down.".format(MIN_OCTAVE))
        elif key is Key.X:
            if self.octave < MAX_OCTAVE:
                self.octave += 1
            else:
                logging.debug("Octave already at maximum of {}; ignoring octave up.".format(MAX_OCTAVE))
        elif key is Key.C:
            if self.velocity > MIN_VELOCITY:
                self.velocity -= VELOCITY_STEP
            else:
                logging.debug("Velocity already at minimum; ignoring velocity down.")
        elif key is Key.V:
            if self.velocity < MAX_VELOCITY:
                self.velocity += VELOCITY_STEP
            else:
                logging.debug("Velocity already at maximum; ignoring velocity up.")
        else:
            return self.maybe_note_on(key)
        return None

    def key_released(self, key: Key) -> Optional[NoteOff]:
        """
        Responds to a key being released, returning a NoteOff if it's a note key.

        :param key: the key that was released
        :return: a NoteOff, or None if the key isn't a note key
        """
        return self.maybe_note_off(key)

    on_press = key_pressed
    on_release = key_released

    def handle(self, key: Key, is_pressed: bool) -> Optional[NoteEvent]:
        """
        Responds to a key press or release, wrapping the result in a :class:`~musical_keyboard.events.NoteEvent`.

        :param key: the key that was pressed or released
        :param is_pressed: True for a press, False for a release
        :return: a NoteEvent, or None if nothing was emitted
        """
        note = self.key_pressed(key) if is_pressed else self.key_released(key)
        return None if note is None else NoteEvent.from_note(note)

    # ------------------------------------------------ Mapping --------------------------------------------------

    def maybe_note(self, key: Key) -> Optional[Tuple[Letter, Octave]]:
        """
        Translates a key into its letter and absolute octave, based on the current base octave.

        :param key: the key to translate
        :return: tuple of (letter, octave), or None if the key isn't a note key
        """
        try:
            octave_offset, letter = _key_to_octave_offset_and_letter[key]
        except (KeyError, TypeError):
            return None
        return letter, octave_offset + self.octave

    resolve = maybe_note

    def maybe_note_on(self, key: Key) -> Optional[NoteOn]:
        """
        Translates a pressed key to a note on event.

        If the given key is already pressed, it is ignored. This avoids triggering notes from a window's key-repeat
        function.
        """
        note = self.maybe_note(key)
        if note is None:
            return None
        letter, octave = note
        if key in self.currently_pressed_keys:
            logging.debug("{} is already held; ignoring repeated press.".format(key))
            return None
        self.currently_pressed_keys[key] = octave
        return NoteOn(letter, octave, self.velocity)

    def maybe_note_off(self, key: Key) -> Optional[NoteOff]:
        """
        Translates a released key to a note off event. Uses the octave that the key's note-on was sent with, or the
        current octave if the key wasn't being held.
        """
        note = self.maybe_note(key)
        if note is None:
            return None
        letter, octave = note
        if key not in self.currently_pressed_keys:
            logging.debug("{} released without having been pressed.".format(key))
            return NoteOff(letter, octave)
        return NoteOff(letter, self.currently_pressed_keys.pop(key))

    # ----------------------------------------------- Held Notes ------------------------------------------------

    def is_held(self, key: Key) -> bool:
        """Whether or not the given key is currently holding a note."""
        return key in self.currently_pressed_keys

    def held_notes(self) -> List[Tuple[Letter, Octave]]:
        """
        Returns the (letter, octave) pairs of all currently held notes, in the order they were pressed.
        """
        return [(_key_to_octave_offset_and_letter[key][1], octave)
                for key, octave in self.currently_pressed_keys.items()]

    def release_all(self) -> List[NoteOff]:
        """
        Releases every held key, returning a NoteOff for each (in the order they were pressed). Useful when the host
        loses focus and will not receive the actual key releases.
        """
        note_offs = [NoteOff(_key_to_octave_offset_and_letter[key][1], octave)
                     for key, octave in self.currently_pressed_keys.items()]
        self.currently_pressed_keys.clear()
        return note_offs

    def copy(self) -> 'MusicalKeyboard':
        """Returns an independent copy of this keyboard, including which keys are held."""
        duplicate = MusicalKeyboard(self.octave, self.velocity)
        duplicate.currently_pressed_keys = dict(self.currently_pressed_keys)
        return duplicate

    def __str__(self):
        return "MusicalKeyboard(octave={}, velocity={}, held={})".format(
            self.octave, self.velocity, [str(letter) + str(octave) for letter, octave in self.held_notes()]
        )

    def __repr__(self):
        return "MusicalKeyboard(octave={}, velocity={}, currently_pressed_keys={})".format(
            self.octave, self.velocity, self.currently_pressed_keys
        )


#: Shorter alias for :class:`MusicalKeyboard`
Keyboard = MusicalKeyboard
