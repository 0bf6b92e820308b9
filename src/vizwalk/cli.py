from __future__ import annotations

import argparse
import sys
from pathlib import Path

import polars as pl

from vizwalk.core.errors import LessonError
from vizwalk.core.grammar import StepKind
from vizwalk.core.tables import list_datasets
from vizwalk.io.config import WalkSettings
from vizwalk.io.errors import IoError
from vizwalk.io.paths import dataset_path
from vizwalk.lessons import LessonContext, export_lesson, get_lesson, iter_results, list_lessons

_COMMANDS = ("list", "show", "export", "datasets")


def _error(msg: str) -> int:
    print(f"[ERROR] {msg}", file=sys.stderr)
    return 2


def _print_table(df: pl.DataFrame, rows: int) -> None:
    """Print the first `rows` rows of a frame, noting how many were cut."""
    with pl.Config(tbl_rows=rows, tbl_hide_dataframe_shape=True):
        print(df.head(rows))
    if df.height > rows:
        print(f"[INFO] {rows} of {df.height} rows shown")


def _cmd_list(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="vizwalk list", description="List lessons in walkthrough order.")
    p.parse_args(argv)
    for lesson in list_lessons():
        print(f"{lesson.lesson_id:<18} {lesson.title}")
    return 0


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="vizwalk show", description="Print a lesson's prose and tables.")
    p.add_argument("lesson", type=str, help="Lesson id (see `vizwalk list`).")
    p.add_argument("--rows", type=int, default=None, help="Rows per table (default: settings).")
    args = p.parse_args(argv)

    settings = WalkSettings.load()
    rows = args.rows if args.rows and args.rows > 0 else settings.max_table_rows
    try:
        lesson = get_lesson(args.lesson)
    except LessonError as e:
        return _error(str(e))

    print(f"# {lesson.title}\n")
    if lesson.summary:
        print(lesson.summary + "\n")
    failed = 0
    for item in iter_results(lesson, LessonContext(settings=settings)):
        if isinstance(item, LessonError):
            failed += 1
            print(f"[WARN] {item}")
            continue
        step = item.step
        if step.title:
            print(f"## {step.title}")
        if step.kind is StepKind.PROSE:
            print(item.output)
        elif step.kind is StepKind.TABLE:
            _print_table(item.output, rows)
        else:
            print(f"[chart] {step.title or f'step {item.index}'}")
        print()
    return 2 if failed else 0


def _cmd_export(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="vizwalk export",
        description="Export lessons as markdown + HTML charts under <out-dir>/<lesson_id>/.",
    )
    p.add_argument("lesson", type=str, help="Lesson id, or 'all'.")
    p.add_argument("--out-dir", type=str, default=None, help="Export root (default: settings.out_dir).")
    p.add_argument("--png", action="store_true", help="Also write PNGs (needs vl-convert-python).")
    args = p.parse_args(argv)

    settings = WalkSettings.load()
    out_dir = Path(args.out_dir or settings.out_dir)
    try:
        lessons = list_lessons() if args.lesson == "all" else [get_lesson(args.lesson)]
        ctx = LessonContext(settings=settings)
        for lesson in lessons:
            written = export_lesson(lesson, ctx, out_dir, png=args.png)
            print(f"[INFO] Wrote {lesson.lesson_id}: {written[0]} (+{len(written) - 1} chart files)")
    except (LessonError, IoError, RuntimeError) as e:
        return _error(str(e))
    return 0


def _cmd_datasets(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="vizwalk datasets", description="List datasets and their files.")
    p.parse_args(argv)
    settings = WalkSettings.load()
    for desc in list_datasets():
        try:
            where = str(dataset_path(settings, desc.name))
        except IoError as e:
            where = f"<unavailable: {e}>"
        print(f"{desc.name.value:<18} {where}")
        print(f"    columns: {', '.join(desc.columns)}")
        if desc.description:
            print(f"    {desc.description}")
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vizwalk", description="Data visualization walkthrough CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    if cmd == "list":
        code = _cmd_list(rest)
    elif cmd == "show":
        code = _cmd_show(rest)
    elif cmd == "export":
        code = _cmd_export(rest)
    elif cmd == "datasets":
        code = _cmd_datasets(rest)
    else:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
