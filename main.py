import sys

from patternkit.demo import run_demo


if __name__ == "__main__":
    run_demo(sys.argv[1] if len(sys.argv) > 1 else None)
