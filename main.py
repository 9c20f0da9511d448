from models.line_equation import LineEquation
from analyzers.line_report import analyze_lines, format_report
from visualization.save_outputs import save_all_outputs

from config import (
    DEMO_LINES,
    OUTPUT_FOLDER,
    RUN_ID,
    SAVE_IMAGES,
    get_active_params,
)


def build_lines(coefficients):
    """
    Wraps (a, b, c) integer triples as LineEquation objects.
    """
    return [LineEquation.from_integers(a, b, c) for a, b, c in coefficients]


def run(coefficients, output_dir=None, run_id=RUN_ID):
    """
    Runs the complete demo for one set of lines:
      1. Build exact lines
      2. Axis intersections, pairwise intersections, parallel groups
      3. Print the report
      4. Save images (when output_dir is given)

    Returns the AnalysisReport.
    """
    lines = build_lines(coefficients)
    if not lines:
        print("[WARN] No lines given. Skipping.")
        return None

    report = analyze_lines(lines)

    for text in format_report(report):
        print(text)

    for lr in report.line_reports:
        if lr.x_error or lr.y_error:
            print(f"[WARN] Axis query failed for {lr.line}: {lr.x_error or lr.y_error}")

    if output_dir is not None:
        paths = save_all_outputs(output_dir, run_id, report, get_active_params())
        for p in paths:
            print(f"[OK] Saved {p}")

    return report


def main():
    """
    Main entry point:
      - Analyses the configured demo lines
      - Saves output files if enabled
    """
    run(DEMO_LINES, OUTPUT_FOLDER if SAVE_IMAGES else None)
    print("\n=== All lines processed ===")


if __name__ == "__main__":
    main()
