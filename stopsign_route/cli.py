import sys
import json
import logging
import argparse
import cv2

from .config import DEFAULT_IMAGE
from .core import process_image, read_image, results_to_json
from .route import default_route, format_route
from .visualize import draw_detections_on_image, show_detections


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stopsign-route",
        description="Detect red octagons in an image and mark nearby route nodes.",
    )
    p.add_argument("image", nargs="?", default=DEFAULT_IMAGE, help="input image (JPG/PNG)")
    p.add_argument("--node", nargs=2, type=float, action="append", metavar=("X", "Y"),
                   help="route node; repeat to replace the example route")
    p.add_argument("--json", dest="json_path", help="write results as JSON to this path")
    p.add_argument("--save", dest="save_path", help="write the annotated image to this path")
    p.add_argument("--no-show", action="store_true", help="do not open the preview window")
    p.add_argument("--debug", action="store_true", help="debug logging and mask plots")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        img = read_image(args.image)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}. Make sure the image path is correct.", file=sys.stderr)
        return 1

    route = default_route(args.node) if args.node else None
    signs, route = process_image(img, route, debug=args.debug)

    print("\n".join(format_route(route)))

    if args.json_path:
        with open(args.json_path, "w", encoding="utf-8") as f:
            json.dump(results_to_json(signs, route), f, ensure_ascii=False, indent=2)
        print(f"[OK] Wrote JSON to: {args.json_path}")

    if args.save_path or not args.no_show:
        vis = draw_detections_on_image(img, signs)

        if args.save_path:
            try:
                ok = cv2.imwrite(args.save_path, vis)
            except cv2.error as e:
                logging.getLogger(__name__).debug("imwrite failed: %s", e)
                ok = False
            if not ok:
                print(f"[ERROR] Failed to write image: {args.save_path}", file=sys.stderr)
                return 1
            print(f"[OK] Wrote visualization to: {args.save_path}")

        if not args.no_show:
            show_detections(vis)

    return 0


if __name__ == "__main__":
    sys.exit(main())
