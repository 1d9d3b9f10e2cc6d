class ShootingDirectionUndefined(Exception):
    pass
