"""
Cavern Runner.

Agents for a two-phase cavern game: hunt an orb using only local
distance hints, then scram to the exit within a step budget while
collecting as much gold as possible along the way.
"""

__version__ = "0.1.0"
