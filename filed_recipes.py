import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_RECIPES_PATH,
    ENV_LOG_LEVEL,
    ENV_RECIPES_PATH,
)
from recipe_codec import FileFormatError
from recipe_repository import InvalidLocationError, RecipeRepository
from recipe_view import markdown_filename, render_listing, render_markdown


def setup_logging(level: str) -> None:
    if not logging.root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Browse and maintain a file of recipes.")
    ap.add_argument("--file", default=None, help=f"Recipe file (default: ${ENV_RECIPES_PATH} or {DEFAULT_RECIPES_PATH})")
    ap.add_argument("--log-level", default=None, help=f"Logging level (default: ${ENV_LOG_LEVEL} or {DEFAULT_LOG_LEVEL})")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List recipes sorted by name")

    show = sub.add_parser("show", help="Print one recipe, or all of them")
    show.add_argument("index", type=int, nargs="?", help="Zero-based recipe index")

    delete = sub.add_parser("delete", help="Delete a recipe and save the file")
    delete.add_argument("index", type=int, help="Zero-based recipe index")

    export = sub.add_parser("export", help="Write every recipe as a Markdown file")
    export.add_argument("--out-dir", default="./out", help="Output directory for Markdown files")
    return ap


def export_markdown(repository: RecipeRepository, out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for recipe in repository.get_all():
        md_path = out_dir / markdown_filename(recipe)
        with open(md_path, "w", encoding="utf-8") as f:
            f.write(render_markdown(recipe))
        written.append(md_path)
    return written


def run(args: argparse.Namespace) -> None:
    path = args.file or os.getenv(ENV_RECIPES_PATH, DEFAULT_RECIPES_PATH)
    repository = RecipeRepository(path)
    repository.load()

    if args.command == "list":
        for line in render_listing(repository.get_all()):
            print(line)
    elif args.command == "show":
        recipes = repository.get_all() if args.index is None else [repository.get_at(args.index)]
        print("\n".join(render_markdown(r) for r in recipes), end="")
    elif args.command == "delete":
        name = repository.get_at(args.index).name
        repository.delete_at(args.index)
        repository.save()
        print(f"Deleted: {name}")
    elif args.command == "export":
        for md_path in export_markdown(repository, Path(args.out_dir)):
            print("Markdown:", md_path)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL))

    try:
        run(args)
    except InvalidLocationError as exc:
        raise SystemExit(f"Invalid recipe file: {exc}")
    except FileFormatError as exc:
        raise SystemExit(f"Malformed recipe file: {exc}")
    except IndexError as exc:
        raise SystemExit(str(exc))
    except OSError as exc:
        raise SystemExit(f"Could not access recipe file: {exc}")


if __name__ == "__main__":
    main()
