#!/usr/bin/env python3
"""
Jordan Survey Runner
====================

Processes a queue of permutation groups, certifying for each one the
largest degree of multiple preprimitivity the Jordan reduction reaches,
and the symmetric / alternating containment when the group holds a
transposition or a 3-cycle. Results are saved as JSON.

Usage:
    python survey/run_survey.py                 # whole queue
    python survey/run_survey.py --only "S(5)"   # one group
    python survey/run_survey.py --verbose       # print every reduction step

Ctrl+C to stop cleanly between jobs.
"""

import os
import sys
import json
import time
import signal
import argparse
from dataclasses import replace

import numpy as np

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from survey.config import DEFAULT_CONFIG, JOB_QUEUE
from jordan_reduction import (
    symmetric_group, alternating_group, cyclic_group, dihedral_group,
    affine_group, projective_group,
    is_preprimitive, is_multiply_pretransitive, is_multiply_preprimitive,
    of_fixing_subgroup, is_pretransitive,
    bootstrap_two, extend_degree,
    full_group_from_swap, full_group_from_three_cycle,
    is_swap, is_three_cycle,
)


RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")


# --- Job builders ---

def build_job(builder, n):
    """Build the permutation action for a queue entry."""
    if builder == "symmetric":
        return symmetric_group(n)
    elif builder == "alternating":
        return alternating_group(n)
    elif builder == "cyclic":
        return cyclic_group(n)
    elif builder == "dihedral":
        return dihedral_group(n)
    elif builder == "affine":
        return affine_group(n)
    elif builder == "projective":
        return projective_group(n)
    else:
        raise ValueError(f"Unknown group builder: {builder}")


# --- Ground truth ---

def _max_degree(predicate, action):
    size = len(action.domain)
    best = 0
    for k in range(1, size + 1):
        if not predicate(action, k):
            break
        best = k
    return best


def _find_element(action, size, test):
    """First element whose support on the domain has `size` points and
    passes `test`."""
    pts = np.array(action.points)
    moved = (action.perms[:, pts] != pts).sum(axis=1)
    for row in action.perms[moved == size]:
        if test(row):
            return row
    return None


# --- Certification ---

def certify(action, config=DEFAULT_CONFIG):
    """Run the Jordan reduction on one group and return a JSON-ready dict."""
    size = len(action.domain)
    record = {
        "group": action.name,
        "order": action.order,
        "points": size,
        "preprimitive": is_preprimitive(action),
        "true_pretransitive_degree": _max_degree(is_multiply_pretransitive, action),
        "true_preprimitive_degree": _max_degree(is_multiply_preprimitive, action),
    }
    if not record["preprimitive"]:
        return record

    timings = {}
    pts = action.points

    # Largest witness with a preprimitive fixing subgroup
    t0 = time.time()
    record["certified_preprimitive_degree"] = 1
    for k in range(size - 2, 0, -1):
        if is_preprimitive(of_fixing_subgroup(action, pts[:k])):
            cert = extend_degree(action, pts[:k], config)
            record["certified_preprimitive_degree"] = cert.degree
            record["preprimitive_certificate"] = cert.to_dict()
            break
    timings["extend"] = time.time() - t0

    # Smallest witness with a pretransitive fixing subgroup
    t0 = time.time()
    record["two_pretransitive"] = None
    for k in range(1, size - 1):
        if is_pretransitive(of_fixing_subgroup(action, pts[:k])):
            cert = bootstrap_two(action, pts[:k], "pretransitive", config)
            record["two_pretransitive"] = {"witness_size": k, "degree": cert.degree}
            break
    timings["bootstrap"] = time.time() - t0

    swap = _find_element(action, 2, is_swap)
    if swap is not None:
        result = full_group_from_swap(action, swap, config)
        record["swap"] = {"claim": result.claim, "verified": result.verify()}

    three = _find_element(action, 3, is_three_cycle)
    if three is not None:
        result = full_group_from_three_cycle(action, three, config)
        record["three_cycle"] = {"claim": result.claim, "verified": result.verify()}

    record["timings"] = timings
    return record


# --- Main runner ---

class SurveyRunner:
    """Process survey jobs from the queue, one group at a time."""

    def __init__(self, config=None, results_dir=RESULTS_DIR):
        self.config = config or DEFAULT_CONFIG
        self.results_dir = results_dir
        self.stop_requested = False

        signal.signal(signal.SIGINT, self._handle_signal)

    def _handle_signal(self, signum, frame):
        print("\n>>> Stop requested. Finishing current job...")
        self.stop_requested = True

    def run(self, only=None):
        os.makedirs(self.results_dir, exist_ok=True)
        jobs = [job for job in JOB_QUEUE if only is None or job[0] == only]
        if not jobs:
            print(f"No job named {only!r}")
            return []

        print("=== Jordan Survey Runner ===")
        print(f"Jobs: {len(jobs)}")
        print(f"Results dir: {self.results_dir}")
        print()

        records = []
        for job_name, builder, n in jobs:
            if self.stop_requested:
                print("Stopped by user.")
                break

            print(f"--- Job: {job_name} ---")
            try:
                action = build_job(builder, n)
                record = certify(action, self.config)
                records.append(record)

                safe_name = job_name.replace("(", "_").replace(")", "").replace(",", "_")
                result_path = os.path.join(self.results_dir, f"{safe_name}.json")
                with open(result_path, "w") as f:
                    json.dump(record, f, indent=2)

                print(f"  preprimitive: {record['preprimitive']}, "
                      f"certified degree: {record.get('certified_preprimitive_degree')}, "
                      f"true degree: {record['true_preprimitive_degree']}")
                print(f"  Saved: {result_path}")

            except Exception as e:
                print(f"  ERROR: {e}")
                import traceback
                traceback.print_exc()

        print("\n=== Done ===")
        return records


# --- Entry point ---

def main():
    parser = argparse.ArgumentParser(description="Jordan Survey Runner")
    parser.add_argument("--only", default=None,
                        help="Run a single job by name, e.g. 'S(5)'")
    parser.add_argument("--verbose", action="store_true",
                        help="Print every reduction step")
    parser.add_argument("--no-verify", action="store_true",
                        help="Skip recomputing derived facts")
    parser.add_argument("--results-dir", default=RESULTS_DIR)
    args = parser.parse_args()

    config = replace(DEFAULT_CONFIG, verbose=args.verbose,
                     verify_steps=not args.no_verify)
    runner = SurveyRunner(config, results_dir=args.results_dir)
    runner.run(only=args.only)


if __name__ == "__main__":
    main()
