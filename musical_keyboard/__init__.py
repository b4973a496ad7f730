"""
musical_keyboard: turns computer keyboard presses and releases into musical note-on and note-off events. The home
row and part of the top row are laid out like two octaves of piano keys, Z and X step the octave, and C and V step
the velocity. Key-repeat is suppressed, and note-offs always match the octave of their note-ons.
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

from .pitch import Letter, Octave, Velocity, midi_pitch, to_music_xml_pitch
from .keys import Key, NOTE_KEYS, OCTAVE_KEYS, VELOCITY_KEYS, MODIFIER_KEYS
from .events import NoteOn, NoteOff, NoteEvent
from .settings import keyboard_settings, KeyboardSettings
from .keyboard import MusicalKeyboard, Keyboard
from .listener import KeyboardListener
from ._package_info import version as __version__
from ._package_info import author as __author__
