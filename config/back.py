import math

# player
PLAYER_SIZE = (40., 40.) # width, height
PLAYER_SPEED = 5. # pixels per frame
PLAYER_MAX_HEALTH = 100
PLAYER_DEFAULT_DIRECTION = (1., 0.)
DIAGONAL_FACTOR = math.sqrt(0.5)

# projectile
PROJECTILE_SPEED = 8. # pixels per frame
PROJECTILE_RADIUS = 5.
PROJECTILE_LIFETIME = 100 # frames
PROJECTILE_COLOR_HEX = '#ff9a3c'

# particle
PARTICLES_PER_SHOT = 5
PARTICLE_SPREAD = 0.25 # radians to each side of the shooting direction
PARTICLE_SPEED_RANGE = (2., 5.)
PARTICLE_RADIUS_RANGE = (2., 5.)
PARTICLE_LIFETIME_RANGE = (20, 30) # frames, upper bound excluded
PARTICLE_HUE_RANGE = (30., 40.)
PARTICLE_SHRINK_FACTOR = 0.97
