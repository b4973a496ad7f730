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

#: Lowest base octave reachable by stepping the octave down
MIN_OCTAVE = -2

#: Highest base octave reachable by stepping the octave up
MAX_OCTAVE = 12

#: Amount by which the velocity keys step the velocity
VELOCITY_STEP = 0.05

#: Bounds checked (before stepping) by the velocity keys
MIN_VELOCITY = 0.0
MAX_VELOCITY = 1.0
