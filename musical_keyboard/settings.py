"""
Module containing the :class:`KeyboardSettings` class, which holds the defaults used when constructing a
:class:`~musical_keyboard.keyboard.MusicalKeyboard` without explicit values. A module-level instance,
:code:`keyboard_settings`, is loaded from a JSON configuration file within the settings directory of the package if
one has been saved there, and otherwise holds the factory defaults.
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

from types import SimpleNamespace
from .utilities import resolve_package_path, SavesToJSON
from ._constants import MIN_OCTAVE, MAX_OCTAVE
import logging
import os


class KeyboardSettings(SimpleNamespace, SavesToJSON):

    """
    Namespace containing the defaults used when constructing a keyboard.

    :param settings_dict: dictionary from which to set all settings attributes
    :ivar default_octave: base octave of a keyboard constructed without an explicit octave. Must be an integer from
        -2 to 12.
    :ivar default_velocity: velocity of a keyboard constructed without an explicit velocity. Must be a number from
        0.0 to 1.0.
    """

    #: Default keyboard settings (from when the package was installed)
    factory_defaults = {
        "default_octave": 2,
        "default_velocity": 1.0,
    }

    _settings_name = "Keyboard settings"
    _json_path = "settings/keyboardSettings.json"

    def __init__(self, settings_dict: dict = None):
        # This is here to help with auto-completion so that the IDE knows what attributes are available
        self.default_octave = self.default_velocity = None
        if settings_dict is None:
            settings_arguments = dict(self.factory_defaults)
        else:
            settings_arguments = {}
            for key in set(settings_dict.keys()).union(set(self.factory_defaults.keys())):
                if key in settings_dict and key in self.factory_defaults:
                    settings_arguments[key] = settings_dict[key]
                elif key in settings_dict:
                    # no factory default for this key, so someone added something to the json file that doesn't belong
                    logging.warning("Unexpected key \"{}\" in {}".format(key, self._json_path))
                    continue
                else:
                    # no setting given in the settings_dict, so we fall back to the factory default
                    settings_arguments[key] = self.factory_defaults[key]
                settings_arguments[key] = self._validate_attribute(key, settings_arguments[key])
        super().__init__(**settings_arguments)

    def restore_factory_defaults(self, persist=False) -> None:
        """
        Restores settings back to their factory defaults. Unless the `persist` argument is set, this is temporary to
        the running of the current script.

        :param persist: if True, rewrites the JSON file from which defaults are loaded, meaning that this reset will
            persist to the running of scripts in the future.
        """
        for key in self.factory_defaults:
            vars(self)[key] = self.factory_defaults[key]
        if persist:
            self.make_persistent()

    def make_persistent(self) -> None:
        """
        Rewrites the JSON file from which settings are loaded, so that the current values become the defaults for
        future scripts.
        """
        json_path = resolve_package_path(self._json_path)
        os.makedirs(os.path.dirname(json_path), exist_ok=True)
        self.save_to_json(json_path)

    @classmethod
    def factory_default(cls):
        """
        Returns a factory default version of these settings.
        """
        return cls({})

    def _to_dict(self):
        return {k: v for k, v in vars(self).items()}

    @classmethod
    def _from_dict(cls, json_object):
        return cls(json_object)

    @classmethod
    def load(cls):
        """
        Loads these settings from their JSON file. If no such file exists, or it is corrupted in some way, this falls
        back to the factory defaults. (Unlike :func:`make_persistent`, this never writes anything to disk.)
        """
        try:
            return cls.load_from_json(resolve_package_path(cls._json_path))
        except FileNotFoundError:
            logging.debug("{} not found; using factory defaults.".format(cls._settings_name))
            return cls.factory_default()
        except (TypeError, KeyError, ValueError):
            # ValueError covers both undecodable JSON and JSON that doesn't hold a settings object
            logging.warning("Error loading {}; falling back to defaults.".format(cls._settings_name.lower()))
            return cls.factory_default()

    @staticmethod
    def _validate_attribute(key, value):
        if key == "default_octave" and not (isinstance(value, int) and not isinstance(value, bool)
                                            and MIN_OCTAVE <= value <= MAX_OCTAVE):
            logging.warning("Invalid value \"{}\" for default_octave: must be an integer from {} to {}. Defaulting "
                            "to {}.".format(value, MIN_OCTAVE, MAX_OCTAVE,
                                            KeyboardSettings.factory_defaults["default_octave"]))
            return KeyboardSettings.factory_defaults["default_octave"]
        elif key == "default_velocity" and not (isinstance(value, (int, float)) and not isinstance(value, bool)
                                                and 0.0 <= value <= 1.0):
            logging.warning("Invalid value \"{}\" for default_velocity: must be a number from 0.0 to 1.0. Defaulting "
                            "to {}.".format(value, KeyboardSettings.factory_defaults["default_velocity"]))
            return KeyboardSettings.factory_defaults["default_velocity"]
        return value

    def __setattr__(self, key, value):
        if all(x is None for x in vars(self).values()):
            # this avoids validation warnings getting sent out when we set the instance variables to None at the
            # beginning of __init__ (which we do as a hint to IDEs)
            super().__setattr__(key, value)
        else:
            super().__setattr__(key, self._validate_attribute(key, value))


#: Instance of :class:`~musical_keyboard.settings.KeyboardSettings` containing the actual defaults to be consulted
keyboard_settings: KeyboardSettings = KeyboardSettings.load()
