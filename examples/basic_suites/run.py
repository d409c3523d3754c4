from seedtest import run_suites

from suites import SUITES


if __name__ == "__main__":
    # Reproduce a failure with: run_suites(SUITES, run_seed="<seed>", filter="known_broken")
    raise SystemExit(run_suites(SUITES, iterations=3))
