"""
Module containing the :class:`Key` enum: the closed set of symbolic keys that the
:class:`~musical_keyboard.keyboard.MusicalKeyboard` responds to. Hosts translate their physical keys or key names
into these, for instance with :func:`Key.from_name`.
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

from enum import Enum
from typing import Optional


class Key(Enum):

    """
    Keys accepted by the keyboard. The home row and part of the top row trigger notes, laid out like the white and
    black keys of a piano starting from :code:`Key.A`. Z and X step the octave down and up; C and V step the velocity
    down and up.
    """

    # Keys associated with notes
    A = "a"
    W = "w"
    S = "s"
    E = "e"
    D = "d"
    F = "f"
    T = "t"
    G = "g"
    Y = "y"
    H = "h"
    U = "u"
    J = "j"
    K = "k"
    O = "o"
    L = "l"
    P = "p"
    Semicolon = ";"
    Quote = "'"

    # Octave
    Z = "z"
    X = "x"

    # Velocity
    C = "c"
    V = "v"

    @property
    def is_note_key(self) -> bool:
        """Whether or not this key plays a note."""
        return self in NOTE_KEYS

    @property
    def is_modifier(self) -> bool:
        """Whether or not this key alters the octave or velocity instead of playing a note."""
        return self in MODIFIER_KEYS

    @classmethod
    def from_name(cls, name: str) -> Optional['Key']:
        """
        Translates a host key name into a Key, returning None if it isn't one of the keys we respond to. Accepts
        single characters in either case (with shifted punctuation folded back to the unshifted key, so ":" is the
        semicolon key), as well as the names "semicolon", "quote" and "apostrophe".

        :param name: the name of the key as reported by the host
        """
        if name is None:
            return None
        searchable_name = name.lower()
        if searchable_name in _shifted_to_unshifted:
            searchable_name = _shifted_to_unshifted[searchable_name]
        if searchable_name in _word_names:
            searchable_name = _word_names[searchable_name]
        try:
            return cls(searchable_name)
        except ValueError:
            return None

    def __repr__(self):
        return "Key.{}".format(self.name)


NOTE_KEYS = (Key.A, Key.W, Key.S, Key.E, Key.D, Key.F, Key.T, Key.G, Key.Y, Key.H, Key.U, Key.J,
             Key.K, Key.O, Key.L, Key.P, Key.Semicolon, Key.Quote)
OCTAVE_KEYS = (Key.Z, Key.X)
VELOCITY_KEYS = (Key.C, Key.V)
MODIFIER_KEYS = OCTAVE_KEYS + VELOCITY_KEYS

_shifted_to_unshifted = {":": ";", "\"": "'"}
_word_names = {"semicolon": ";", "quote": "'", "apostrophe": "'"}
