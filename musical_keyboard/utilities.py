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

import os
import sys
from expenvelope.json_serializer import SavesToJSON


def resolve_package_path(path: str) -> str:
    """
    Resolves a path relative to the package source directory (or to the executable's directory when running from a
    frozen binary).

    :param path: a path relative to the package
    :return: the resolved path
    """
    if getattr(sys, 'frozen', False):
        # Python is running from a binary executable made by PyInstaller (the bootloader adds 'frozen' to sys)
        package_dir = os.path.dirname(sys.executable)
    else:
        package_dir = os.path.dirname(__file__)

    return os.path.join(package_dir, path)
