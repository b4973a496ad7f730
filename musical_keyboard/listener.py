"""
Module containing the :class:`KeyboardListener` class, which connects a
:class:`~musical_keyboard.keyboard.MusicalKeyboard` to the computer keyboard via pynput (an optional dependency,
installed with the "HID" extra) and calls back with each resulting note event.
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

from ._dependencies import pynput
from .keyboard import MusicalKeyboard
from .keys import Key
from .events import NoteEvent
from typing import Callable, Optional
import threading


class KeyboardListener:

    """
    Listens to the computer keyboard and feeds the keys that the given keyboard responds to into it, calling the
    callback with every :class:`~musical_keyboard.events.NoteEvent` that results. Other keys are dropped. All events
    are passed to the keyboard one at a time, so it is safe to also call :func:`feed_press` and :func:`feed_release`
    from another thread while listening.

    :param keyboard: the MusicalKeyboard to feed. If None, a default one is created.
    :param callback: function taking a single NoteEvent argument
    :param suppress: if true, keyboard events are consumed and not passed on to other processes
    :param kwargs: any further keyword arguments are passed on to the pynput keyboard Listener
    :ivar keyboard: the MusicalKeyboard being fed
    """

    def __init__(self, keyboard: MusicalKeyboard = None, callback: Callable[[NoteEvent], None] = None,
                 suppress: bool = False, **kwargs):
        self.keyboard = MusicalKeyboard() if keyboard is None else keyboard
        self.callback = callback
        self.suppress = suppress
        self._listener_kwargs = kwargs
        self._lock = threading.Lock()
        self._listener = None

    @property
    def is_listening(self) -> bool:
        return self._listener is not None

    def start(self) -> 'KeyboardListener':
        """
        Starts listening to the computer keyboard on a background thread.

        :return: self
        """
        if pynput is None:
            raise ImportError("Cannot use keyboard input because package pynput was not found. "
                              "Install pynput and try again.")
        self.stop()  # in case one is already running
        self._listener = pynput.keyboard.Listener(
            on_press=lambda key_argument: self.feed_press(KeyboardListener._name_from_key(key_argument)),
            on_release=lambda key_argument: self.feed_release(KeyboardListener._name_from_key(key_argument)),
            suppress=self.suppress, **self._listener_kwargs
        )
        self._listener.start()
        return self

    def stop(self) -> None:
        """
        Stops listening, and ends any notes still held (since their releases will no longer be heard).
        """
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
            with self._lock:
                note_offs = self.keyboard.release_all()
            for note_off in note_offs:
                self._dispatch(NoteEvent.off(note_off))

    def feed_press(self, key_name: str) -> Optional[NoteEvent]:
        """
        Feeds a key press, given by name, into the keyboard.

        :param key_name: the name of the key, as understood by :func:`~musical_keyboard.keys.Key.from_name`
        :return: the resulting NoteEvent, if any
        """
        return self._feed(key_name, True)

    def feed_release(self, key_name: str) -> Optional[NoteEvent]:
        """
        Feeds a key release, given by name, into the keyboard.

        :param key_name: the name of the key, as understood by :func:`~musical_keyboard.keys.Key.from_name`
        :return: the resulting NoteEvent, if any
        """
        return self._feed(key_name, False)

    def _feed(self, key_name, is_pressed):
        key = Key.from_name(key_name)
        if key is None:
            return None
        with self._lock:
            event = self.keyboard.handle(key, is_pressed)
        if event is not None:
            self._dispatch(event)
        return event

    def _dispatch(self, event):
        if self.callback is not None:
            self.callback(event)

    @staticmethod
    def _name_from_key(key_or_key_code) -> Optional[str]:
        # pynput gives a KeyCode (with a char) for character keys, and a Key (with a name) for special keys
        if key_or_key_code is None:
            return None
        char = getattr(key_or_key_code, "char", None)
        if char is not None:
            return char
        return getattr(key_or_key_code, "name", None)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def __repr__(self):
        return "KeyboardListener({}, listening={})".format(repr(self.keyboard), self.is_listening)
