import sys

import wavemesh as wm
from wavemesh.utils import logger


def describe(data: wm.OBJData):
    """Короткая сводка по загруженному документу"""
    logger.info(f"{data.name}: {len(data.positions)} positions, "
                f"{len(data.normals)} normals, {len(data.uvs)} uvs")
    for mesh in data.meshes:
        material = mesh.material.name if mesh.material else "-"
        logger.info(f"  mesh '{mesh.name}': {mesh.face_count} faces, material {material}")
        if mesh.material:
            for slot, image in mesh.material.maps.items():
                logger.info(f"    {slot.name.lower()} map {image.name} "
                            f"({image.width}x{image.height}, {image.channels} ch)")


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else "cube.obj"

    loader = wm.OBJLoader(wm.Config(triangulate=True))
    try:
        data = loader.load(path)
    except wm.OBJLoadError as exc:
        logger.error(f"Failed to load {path}: {exc}")
        sys.exit(1)

    describe(data)
    for warning in loader.warnings:
        logger.warning(warning)
    for error in loader.errors:
        logger.error(error)

    # numpy‑буферы, готовые к загрузке в GPU
    positions = data.positions_array()
    logger.info(f"positions array: {positions.shape} {positions.dtype}")
