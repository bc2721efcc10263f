# tests/test_integration.py
"""Integration smoke tests."""

from __future__ import annotations

import numpy as np
import pytest


def test_package_import_smoke() -> None:
    """Smoke test: public API is importable from the package root."""
    import beltframe

    assert callable(beltframe.build_belt_frame)
    assert beltframe.get_settings() is beltframe.get_settings()


@pytest.mark.slow
def test_locating_chain(belt_frame, assert_orthonormal) -> None:
    """Belt frame, flipped axes and blade offset compose to a rigid pose."""
    from beltframe import compose, rotation, translation

    belt_axes = np.diag([-1.0, 1.0, -1.0, 1.0])
    blade = compose(translation((0.011, 0.047, 153.319)), rotation(-49.0, "z"))
    chain = compose(belt_frame.transform, belt_axes, blade)

    assert_orthonormal(chain[:3, :3])
    expected_origin = belt_frame.transform @ belt_axes @ np.array([0.011, 0.047, 153.319, 1.0])
    assert np.allclose(chain[:, 3], expected_origin)


@pytest.mark.slow
def test_example_script_runs() -> None:
    import importlib.util
    from pathlib import Path

    path = Path(__file__).resolve().parents[1] / "examples" / "belt_locating.py"
    spec = importlib.util.spec_from_file_location("belt_locating", path)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    module.main()
