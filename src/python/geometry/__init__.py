from geometry import math_helpers, primitives

Point2D = primitives.Point2D
WheelVector = primitives.WheelVector
TankCommand = primitives.TankCommand

wrap_degrees = math_helpers.wrap_degrees
linear_ramp = math_helpers.linear_ramp
clip = math_helpers.clip
magnitude = math_helpers.magnitude
degree_angle = math_helpers.degree_angle
normalize_by_max = math_helpers.normalize_by_max
