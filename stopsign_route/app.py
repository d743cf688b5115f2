from typing import List, Optional
import logging
import math
import cv2
import numpy as np
from fastapi import FastAPI, File, UploadFile, Query, HTTPException
from fastapi.responses import JSONResponse

from .core import process_image, results_to_json
from .route import default_route
from .types import RouteNode

logger = logging.getLogger(__name__)

app = FastAPI(title="Stop Sign Route API", version="0.1.0")


def parse_route(s: Optional[str]) -> Optional[List[RouteNode]]:
    """'100,150;200,250' -> nodes. Empty, missing or only separators -> None (example route)."""
    if s is None or not str(s).strip():
        return None
    points = []
    for part in s.split(";"):
        if not part.strip():
            continue
        xy = [v.strip() for v in part.split(",")]
        if len(xy) != 2:
            raise ValueError(f"Expected 'x,y', got {part!r}")
        x, y = float(xy[0]), float(xy[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Route coordinates must be finite, got {part!r}")
        points.append((x, y))
    if not points:
        return None
    return default_route(points)


def decode_upload_to_bgr(upload: UploadFile) -> np.ndarray:
    data = upload.file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Empty file.")
    arr = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if img is None:
        raise HTTPException(status_code=400, detail="Could not decode image. Provide a valid JPG/PNG.")
    return img


@app.post("/detect")
def detect(
    file: UploadFile = File(...),
    route: Optional[str] = Query(None, description='Route nodes as "x,y;x,y", default is the example route'),
):
    try:
        nodes = parse_route(route)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    img = decode_upload_to_bgr(file)
    logger.info("Detecting stop signs in %s (%dx%d)", file.filename, img.shape[1], img.shape[0])

    signs, nodes = process_image(img, nodes)
    return JSONResponse(results_to_json(signs, nodes))
