"""
Module containing the events produced by the keyboard: :class:`NoteOn`, :class:`NoteOff`, and :class:`NoteEvent`,
which wraps either of them for callers that want a single stream of events.
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

from .pitch import Letter, Octave, midi_pitch, to_music_xml_pitch
from collections import namedtuple
from typing import Union
import pymusicxml


class NoteOn(namedtuple("NoteOn", "letter octave velocity")):

    """
    Event signalling that a note should start sounding.

    :param letter: the :class:`~musical_keyboard.pitch.Letter` of the note
    :param octave: the absolute octave of the note
    :param velocity: the loudness of the note, nominally from 0.0 to 1.0
    """

    __slots__ = ()

    @property
    def midi_pitch(self) -> int:
        """MIDI pitch number of this note (C4 = 60)."""
        return midi_pitch(self.letter, self.octave)

    def to_music_xml_pitch(self) -> pymusicxml.Pitch:
        """Converts the pitch of this note to a pymusicxml Pitch object."""
        return to_music_xml_pitch(self.letter, self.octave)

    def to_event(self) -> 'NoteEvent':
        """Wraps this in a :class:`NoteEvent`."""
        return NoteEvent.on(self)

    def _to_dict(self) -> dict:
        return {"type": "note_on", "letter": self.letter.name, "octave": self.octave, "velocity": self.velocity}

    @classmethod
    def _from_dict(cls, json_dict):
        return cls(Letter[json_dict["letter"]], json_dict["octave"], json_dict["velocity"])


class NoteOff(namedtuple("NoteOff", "letter octave")):

    """
    Event signalling that a note should stop sounding.

    :param letter: the :class:`~musical_keyboard.pitch.Letter` of the note
    :param octave: the absolute octave of the note
    """

    __slots__ = ()

    @property
    def midi_pitch(self) -> int:
        """MIDI pitch number of this note (C4 = 60)."""
        return midi_pitch(self.letter, self.octave)

    def to_music_xml_pitch(self) -> pymusicxml.Pitch:
        """Converts the pitch of this note to a pymusicxml Pitch object."""
        return to_music_xml_pitch(self.letter, self.octave)

    def to_event(self) -> 'NoteEvent':
        """Wraps this in a :class:`NoteEvent`."""
        return NoteEvent.off(self)

    def _to_dict(self) -> dict:
        return {"type": "note_off", "letter": self.letter.name, "octave": self.octave}

    @classmethod
    def _from_dict(cls, json_dict):
        return cls(Letter[json_dict["letter"]], json_dict["octave"])


class NoteEvent(namedtuple("NoteEvent", "kind note")):

    """
    Either a note-on or a note-off. The kind is "on" or "off", and the note is the wrapped :class:`NoteOn` or
    :class:`NoteOff`. Create one with :func:`NoteEvent.on`, :func:`NoteEvent.off`, or :func:`NoteEvent.from_note`
    rather than directly.

    :ivar kind: either "on" or "off"
    :ivar note: the wrapped NoteOn or NoteOff
    """

    __slots__ = ()

    @classmethod
    def on(cls, note_on: NoteOn) -> 'NoteEvent':
        if not isinstance(note_on, NoteOn):
            raise TypeError("NoteEvent.on expects a NoteOn, not {}.".format(type(note_on).__name__))
        return cls("on", note_on)

    @classmethod
    def off(cls, note_off: NoteOff) -> 'NoteEvent':
        if not isinstance(note_off, NoteOff):
            raise TypeError("NoteEvent.off expects a NoteOff, not {}.".format(type(note_off).__name__))
        return cls("off", note_off)

    @classmethod
    def from_note(cls, note: Union[NoteOn, NoteOff]) -> 'NoteEvent':
        """
        Wraps either a NoteOn or a NoteOff in a NoteEvent of the appropriate kind.

        :param note: a NoteOn or NoteOff
        """
        if isinstance(note, NoteOn):
            return cls.on(note)
        elif isinstance(note, NoteOff):
            return cls.off(note)
        raise TypeError("Can only make a NoteEvent from a NoteOn or NoteOff, not {}.".format(type(note).__name__))

    @property
    def is_on(self) -> bool:
        return self.kind == "on"

    @property
    def is_off(self) -> bool:
        return self.kind == "off"

    @property
    def letter(self) -> Letter:
        return self.note.letter

    @property
    def octave(self) -> Octave:
        return self.note.octave

    @property
    def midi_pitch(self) -> int:
        return self.note.midi_pitch

    def _to_dict(self) -> dict:
        return self.note._to_dict()

    @classmethod
    def _from_dict(cls, json_dict):
        if json_dict["type"] == "note_on":
            return cls.on(NoteOn._from_dict(json_dict))
        elif json_dict["type"] == "note_off":
            return cls.off(NoteOff._from_dict(json_dict))
        raise ValueError("Unknown note event type \"{}\".".format(json_dict["type"]))

    def __repr__(self):
        return "NoteEvent.{}({})".format(self.kind, repr(self.note))
