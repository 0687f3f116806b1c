# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""gatuple CLI Entry Point.

Builds a plane and a line from homogeneous points, reports their meet
and which probe points lie on them.

    python main.py
    python main.py line.v=[0,0,1] "probes=[[0,0,1]]"
"""

import hydra
from omegaconf import DictConfig, OmegaConf

from geometry.plucker import incident, line, meet, plane, point, to_euclidean
from log import get_logger, set_level

logger = get_logger(__name__)


def _point(coords):
    if len(coords) != 3:
        raise ValueError(f"Points need 3 coordinates, got {list(coords)}")
    return point(*(float(c) for c in coords))


def run(cfg: DictConfig) -> dict:
    """Evaluate the configured scene.

    Args:
        cfg (DictConfig): The scene.

    Returns:
        dict: ``meet`` (Euclidean point or ``None`` when the line is
        parallel to or inside the plane) and per-probe incidence flags.
    """
    atol = float(cfg.atol)
    flat = plane(*(_point(p) for p in cfg.plane))
    ray = line(_point(cfg.line.u), _point(cfg.line.v))
    logger.info("Plane: %s", flat)
    logger.info("Line: %s", ray)

    hit = meet(ray, flat)
    logger.info("Meet: %s", hit)
    try:
        meet_point = to_euclidean(hit, eps=atol)
        logger.info("Meet point: (%g, %g, %g)", *meet_point)
    except ValueError:
        meet_point = None
        logger.warning("Line does not cross the plane at a single finite point")

    probes = []
    for coords in cfg.get("probes", []):
        p = _point(coords)
        on_plane = incident(p, flat, atol)
        on_line = incident(p, ray, atol)
        logger.info("Probe %s: on plane=%s, on line=%s", list(coords), on_plane, on_line)
        probes.append({"point": list(coords), "on_plane": on_plane, "on_line": on_line})

    return {"meet": meet_point, "probes": probes}


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    set_level(cfg.get("log_level", "INFO"))
    logger.debug("Config:\n%s", OmegaConf.to_yaml(cfg))
    run(cfg)


if __name__ == "__main__":
    main()
