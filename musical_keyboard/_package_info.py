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

name = "musical_keyboard"

version = "0.1.0"

author = "The musical_keyboard developers"

description = "Translates computer keyboard presses and releases into musical note-on / note-off events, " \
              "with octave and velocity modifier keys."

install_requires = ['pymusicxml >= 0.5.4', 'expenvelope >= 0.6.8']

extras_require = {
    'HID': 'pynput',
}

extras_require['all'] = list(extras_require.values())
extras_require['test'] = ['pytest']

package_data = {
    'musical_keyboard': ['settings/*'],
}

classifiers = [
    "Programming Language :: Python :: 3.6",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    "Operating System :: OS Independent",
]
