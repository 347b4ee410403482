"""Pipeline stages: floor plan in, accuracy result out.

The stages in order:

  floorplan  parse the traced outline and the user's columns
  scorer     sample optimal positions, compare columns against them
               and against prior users' placements
"""
