# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import os

import pytest
from omegaconf import OmegaConf

from main import run

CONF = os.path.join(os.path.dirname(__file__), os.pardir, "conf", "config.yaml")


@pytest.fixture
def cfg():
    return OmegaConf.load(CONF)


class TestRun:
    def test_default_scene(self, cfg):
        result = run(cfg)
        assert result["meet"] == pytest.approx((1 / 3, 1 / 3, 1 / 3), abs=1e-5)
        on_line_probe, origin_probe = result["probes"]
        assert on_line_probe["on_plane"]
        assert not on_line_probe["on_line"]
        assert not origin_probe["on_plane"]
        assert origin_probe["on_line"]

    def test_parallel_line(self, cfg):
        cfg.line.u = [0.0, 0.0, 0.0]
        cfg.line.v = [1.0, -1.0, 0.0]
        result = run(cfg)
        assert result["meet"] is None

    def test_bad_point(self, cfg):
        cfg.line.u = [0.0, 0.0]
        with pytest.raises(ValueError):
            run(cfg)
