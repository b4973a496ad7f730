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

import threading
from types import SimpleNamespace
import pytest
import musical_keyboard.listener
from musical_keyboard import KeyboardListener, MusicalKeyboard, Letter, NoteOn, NoteOff, NoteEvent


class FakePynputListener:

    instances = []

    def __init__(self, on_press=None, on_release=None, suppress=False, **kwargs):
        self.on_press = on_press
        self.on_release = on_release
        self.suppress = suppress
        self.kwargs = kwargs
        self.running = False
        FakePynputListener.instances.append(self)

    def start(self):
        self.running = True

    def stop(self):
        self.running = False


@pytest.fixture
def fake_pynput(monkeypatch):
    FakePynputListener.instances.clear()
    monkeypatch.setattr(musical_keyboard.listener, "pynput",
                        SimpleNamespace(keyboard=SimpleNamespace(Listener=FakePynputListener)))
    return FakePynputListener


def test_feeding_key_names():
    events = []
    listener = KeyboardListener(MusicalKeyboard(2, 1.0), events.append)
    assert listener.feed_press("a") == NoteEvent.on(NoteOn(Letter.C, 2, 1.0))
    assert listener.feed_press("a") is None
    assert listener.feed_press("x") is None
    assert listener.feed_release("A") == NoteEvent.off(NoteOff(Letter.C, 2))
    assert listener.feed_press("q") is None
    assert listener.feed_release("space") is None
    assert listener.feed_press(None) is None
    assert events == [NoteEvent.on(NoteOn(Letter.C, 2, 1.0)), NoteEvent.off(NoteOff(Letter.C, 2))]
    assert listener.keyboard.octave == 3


def test_default_keyboard_and_no_callback():
    listener = KeyboardListener()
    assert listener.keyboard.octave == 2
    assert listener.feed_press(";") == NoteEvent.on(NoteOn(Letter.E, 3, 1.0))


def test_name_from_key():
    assert KeyboardListener._name_from_key(SimpleNamespace(char="k", vk=75)) == "k"
    assert KeyboardListener._name_from_key(SimpleNamespace(char=None, name="shift")) == "shift"
    assert KeyboardListener._name_from_key(SimpleNamespace(name="space")) == "space"
    assert KeyboardListener._name_from_key(None) is None


def test_start_without_pynput(monkeypatch):
    monkeypatch.setattr(musical_keyboard.listener, "pynput", None)
    listener = KeyboardListener()
    with pytest.raises(ImportError):
        listener.start()
    assert not listener.is_listening


def test_listening_through_pynput(fake_pynput):
    events = []
    with KeyboardListener(MusicalKeyboard(2, 1.0), events.append, suppress=True) as listener:
        assert listener.is_listening
        pynput_listener = fake_pynput.instances[-1]
        assert pynput_listener.running and pynput_listener.suppress
        pynput_listener.on_press(SimpleNamespace(char="w"))
        pynput_listener.on_press(SimpleNamespace(char="w"))
        pynput_listener.on_press(SimpleNamespace(char=None, name="shift"))
        pynput_listener.on_press(SimpleNamespace(char="j"))
        pynput_listener.on_release(SimpleNamespace(char="j"))
    assert not listener.is_listening
    assert not pynput_listener.running
    # the held W gets released when listening stops
    assert events == [
        NoteEvent.on(NoteOn(Letter.Csh, 2, 1.0)),
        NoteEvent.on(NoteOn(Letter.B, 2, 1.0)),
        NoteEvent.off(NoteOff(Letter.B, 2)),
        NoteEvent.off(NoteOff(Letter.Csh, 2)),
    ]
    assert listener.keyboard.pressed == {}


def test_restarting_replaces_listener(fake_pynput):
    listener = KeyboardListener().start()
    first = fake_pynput.instances[-1]
    listener.start()
    assert not first.running
    assert fake_pynput.instances[-1].running
    listener.stop()
    listener.stop()
    assert not listener.is_listening


def test_feeding_from_many_threads():
    events = []
    events_lock = threading.Lock()

    def record(event):
        with events_lock:
            events.append(event)

    listener = KeyboardListener(MusicalKeyboard(2, 1.0), record)

    def play(key_name):
        for _ in range(200):
            listener.feed_press(key_name)
            listener.feed_press(key_name)
            listener.feed_release(key_name)

    threads = [threading.Thread(target=play, args=(key_name,)) for key_name in "asdfghjk"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert listener.keyboard.pressed == {}
    assert len([event for event in events if event.is_on]) == 8 * 200
    assert len([event for event in events if event.is_off]) == 8 * 200
