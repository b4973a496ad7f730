"""
Module containing the pitch abstractions used by the keyboard: the :class:`Letter` enum of the twelve semitone
classes, and the :code:`Octave` and :code:`Velocity` aliases. Also contains helpers for converting a letter/octave
pair to a MIDI pitch number or to a pymusicxml Pitch.
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
from typing import Tuple
import functools
import pymusicxml


#: A signed integer labelling an absolute octave (C4 is middle C)
Octave = int

#: Normalized loudness of a note, nominally from 0.0 to 1.0
Velocity = float


##################################################################################################################
#                                              Pitch-Related Constants
##################################################################################################################


_sharp_spellings = (('C', 0), ('C', 1), ('D', 0), ('D', 1), ('E', 0), ('F', 0),
                    ('F', 1), ('G', 0), ('G', 1), ('A', 0), ('A', 1), ('B', 0))
_step_pitch_classes = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
_alteration_suffixes = {"": 0, "#": 1, "sh": 1, "s": 1, "sharp": 1, "b": -1, "f": -1, "flat": -1}


##################################################################################################################
#                                                  Letter Enum
##################################################################################################################


class Letter(Enum):

    """
    One of the twelve semitone classes of the chromatic scale. The value of each member is its pitch class (0 for C,
    up to 11 for B). Black keys are named by their sharp spelling, e.g. :code:`Letter.Csh` for C-sharp.
    """

    C = 0
    Csh = 1
    D = 2
    Dsh = 3
    E = 4
    F = 5
    Fsh = 6
    G = 7
    Gsh = 8
    A = 9
    Ash = 10
    B = 11

    @property
    def pitch_class(self) -> int:
        """Pitch class of this letter, from 0 (C) to 11 (B)."""
        return self.value

    @property
    def step_and_alteration(self) -> Tuple[str, int]:
        """
        The (step name, alteration) pair that spells this letter, using sharps for the black keys.
        So :code:`Letter.Fsh.step_and_alteration` is :code:`("F", 1)`.
        """
        return _sharp_spellings[self.value]

    @classmethod
    @functools.lru_cache()
    def from_string(cls, name: str) -> 'Letter':
        """
        Interprets a note name as a Letter.

        :param name: a step name (case insensitive) optionally followed by an accidental: "C", "c#", "Csh", "Db",
            "e-flat" etc. Flat spellings resolve to the enharmonically equivalent sharp letter.
        """
        processed_name = name.strip().lower().replace(" ", "").replace("-", "").replace("_", "")
        if len(processed_name) == 0 or processed_name[0].upper() not in _step_pitch_classes:
            raise ValueError("Bad letter name \"{}\". Use a step name from A to G, optionally followed by an "
                             "accidental (e.g. \"C#\" or \"Bb\").".format(name))
        try:
            alteration = _alteration_suffixes[processed_name[1:]]
        except KeyError:
            raise ValueError("Bad accidental in letter name \"{}\".".format(name))
        return cls((_step_pitch_classes[processed_name[0].upper()] + alteration) % 12)

    def __str__(self):
        step, alteration = self.step_and_alteration
        return step + "#" * alteration

    def __repr__(self):
        return "Letter.{}".format(self.name)


##################################################################################################################
#                                                Pitch Conversions
##################################################################################################################


def midi_pitch(letter: Letter, octave: Octave) -> int:
    """
    Converts a letter and octave to a MIDI pitch number, such that C4 (middle C) is 60.

    :param letter: the Letter of the note
    :param octave: the absolute octave of the note
    :return: the MIDI pitch number (which may fall outside of 0-127 for extreme octaves)
    """
    return (octave + 1) * 12 + letter.pitch_class


def to_music_xml_pitch(letter: Letter, octave: Octave) -> pymusicxml.Pitch:
    """
    Converts a letter and octave to a pymusicxml Pitch object, spelling black keys with sharps.

    :param letter: the Letter of the note
    :param octave: the absolute octave of the note
    """
    step, alteration = letter.step_and_alteration
    return pymusicxml.Pitch(step, octave, alteration)
