# -*- coding: utf-8 -*-
# usvg-scenes/main.py

"""
Scene loading driver:
  1) Load every scene document named on the command line
  2) Log image size and per-primitive counts
  3) Optionally write a JSON summary and a preview plot next to each document

Usage:
  python main.py [--export] scene1.xml [scene2.xml.gz ...]
"""

import logging
import os
import sys

from scene.loader import SceneLoader
from scene.errors import SceneError
from scene.stats.export import write_summary_json


def run(paths, export=False):
    """Load each path; return the number of documents that failed."""
    log = logging.getLogger("usvg-scenes")
    failures = 0
    for path in paths:
        loader = SceneLoader(path)
        try:
            scene = loader.load()
        except SceneError as e:
            log.error("Failed to read %s: %s", path, e)
            failures += 1
            continue

        log.info("-" * 64)
        log.info("Successfully read XML file: %s", path)
        log.info("Image dimensions: %d x %d", scene.width, scene.height)
        log.info("Number of diffusion curves: %d", len(scene.diffusion_curves))
        log.info("Number of Poisson curves: %d", len(scene.poisson_curves))
        log.info("Number of gradient meshes: %d", len(scene.gradient_meshes))

        if export:
            stem = os.path.join(os.path.dirname(path), loader.name)
            write_summary_json(loader.summary(), stem + "_summary.json")
            from post.plot_scene import plot_scene
            plot_scene(scene, show=False, save_path=stem + "_preview.png", title=loader.name)
            log.info("Summary and preview written next to %s", path)
    return failures


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    args = sys.argv[1:]
    export = "--export" in args
    paths = [a for a in args if a != "--export"]
    if not paths:
        print(__doc__.strip())
        sys.exit(2)

    sys.exit(1 if run(paths, export=export) else 0)
