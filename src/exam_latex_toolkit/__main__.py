"""Allow ``python -m exam_latex_toolkit``."""

from exam_latex_toolkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
