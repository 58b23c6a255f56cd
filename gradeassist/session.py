"""
Batch grading session over the class roster.

Skips the roster rows already recorded in the output log, then grades the
remaining students one at a time, appending each result as soon as it is
known.
"""

from .assignment_grader import AssignmentGrader
from .config_loader import GraderConfig
from .console import Console
from .exceptions import ConfigurationError, ToolchainError
from .launcher import ToolLauncher
from .locator import SubmissionLocator
from .models import Assignment, GradeResult, RosterEntry
from .output_log import OutputLog, format_score
from .problem_grader import ProblemGrader
from .reviewer import ReviewDispatcher
from .roster import load_roster


def grade_student(
    entry: RosterEntry,
    locator: SubmissionLocator,
    grader: AssignmentGrader,
    assignment: Assignment,
) -> GradeResult:
    """
    Locate, unpack and grade one student's submission.

    Args:
        entry: Roster row of the student.
        locator: Resolves the student's submission.
        grader: Grades the unpacked submission.
        assignment: Problems to grade.

    Returns:
        The student's GradeResult. Missing submissions score -1.
    """
    submission = locator.locate(entry.student_number)
    if submission is None:
        print(f"  Warning: submission for {entry.student_number} not found")
        return GradeResult.missing_submission(entry.student_number)

    workdir = locator.unpack(submission)
    return grader.grade(assignment, workdir, entry.student_number)


def print_grade_summary(entry: RosterEntry, grade: GradeResult) -> None:
    """
    Print a summary of the grade to console.
    """
    print(f"\n  {'='*50}")
    print(f"  Student: {entry.student_number} (No. {entry.sequence_id})")
    if grade.missing:
        print("  Submission: MISSING")
    else:
        print(f"  Final Score: {grade.score:.1f}")
    print(f"  Manual Review: {'Yes' if grade.needs_review else 'No'}")
    print(f"  {'='*50}")

    for problem in grade.problem_scores:
        score = "NOT FOUND" if problem.needs_review else f"{problem.score}"
        print(f"  [{problem.weight:>3}%] {problem.problem_name}: {score}")

    print()


def run_grading_session(
    config: GraderConfig,
    assignment: Assignment | None = None,
    console: Console | None = None,
    launcher: ToolLauncher | None = None,
) -> list[GradeResult]:
    """
    Run the complete grading session.

    Args:
        config: Session configuration.
        assignment: Problems to grade. Built from the config if omitted.
        console: Channel to the human grader.
        launcher: Starts the external reviewer tools.

    Returns:
        GradeResult objects for the students graded in this run.

    Raises:
        RosterError: If the roster cannot be loaded.
        ToolchainError: If a reviewer tool cannot be started.
        ConfigurationError: If the assignment cannot be graded.
    """
    assignment = assignment or config.build_assignment()
    console = console or Console()
    launcher = launcher or ToolLauncher(verbose=config.verbose)

    print(f"Loading roster from {config.roster_path}...")
    roster = load_roster(
        config.roster_path,
        sheet_name=config.roster_sheet,
        id_column=config.id_column,
        student_number_column=config.student_number_column,
    )
    print(f"Found {len(roster)} students, {len(assignment.problems)} problems per assignment")

    output_log = OutputLog(config.output_file, delimiter=config.output_delimiter)
    offset = output_log.count_lines()
    print(f"{offset} lines previously.")
    if offset > len(roster):
        print(f"Warning: {config.output_file} has more lines than the roster has students")

    if not config.working_dir.is_dir():
        raise ConfigurationError(f"Working directory not found: {config.working_dir}")

    locator = SubmissionLocator(config.working_dir, console)
    reviewer = ReviewDispatcher(
        console,
        launcher,
        tools=config.tools,
        timeout_seconds=config.execution_timeout_seconds,
    )
    grader = AssignmentGrader(ProblemGrader(reviewer), console)

    results: list[GradeResult] = []
    pending = roster[offset:]

    for i, entry in enumerate(pending, offset + 1):
        print(f"\n[{i}/{len(roster)}] Start grading student: {entry.student_number}")

        try:
            grade = grade_student(entry, locator, grader, assignment)
        except (ToolchainError, ConfigurationError):
            raise
        except Exception as e:
            print(f"  Warning: grading {entry.student_number} failed: {e}")
            grade = GradeResult.missing_submission(entry.student_number)

        output_log.append(grade)
        print_grade_summary(entry, grade)
        results.append(grade)

    # Print summary
    print("\n" + "=" * 60)
    print("GRADING COMPLETE")
    print("=" * 60)
    print(f"Students graded this session: {len(results)}")

    graded = [r for r in results if not r.missing]
    if graded:
        avg_score = sum(r.score for r in graded) / len(graded)
        print(f"Average score: {format_score(round(avg_score, 1))}")
    flagged = sum(1 for r in results if r.needs_review)
    if results:
        print(f"Need manual review: {flagged}/{len(results)}")

    return results
