def segments_intersect(a1, a2, b1, b2):
    """
    Parametric segment/segment test between a1-a2 and b1-b2.
    Endpoints count as touching. Parallel and collinear segments (zero
    denominator) are reported as not intersecting.
    """
    x1, y1 = a1.x, a1.y
    x2, y2 = a2.x, a2.y
    x3, y3 = b1.x, b1.y
    x4, y4 = b2.x, b2.y

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0.0:
        return False

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    return 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0


def resolve_floor_collision(particle, vx, vy, config):
    """
    Clamp a particle that sank below the floor and bleed off its speed so it
    settles instead of bouncing.

    - vx, vy: the velocity the particle was integrated with this tick.
    - Downward impacts keep ``floor_damping`` of their vertical speed, upward
      motion at the floor is stopped.
    - Horizontal speed keeps ``floor_friction``.

    Speeds are encoded through ``old_pos`` since velocity is implicit.
    Returns True if the particle touched the floor.
    """
    if particle.pinned or particle.pos.y <= config.floor_y:
        return False

    particle.pos.y = config.floor_y
    if vy > 0.0:
        particle.old_pos.y = particle.pos.y - vy * config.floor_damping
    else:
        particle.old_pos.y = particle.pos.y
    particle.old_pos.x = particle.pos.x - vx * config.floor_friction
    return True
