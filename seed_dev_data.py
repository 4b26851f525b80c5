"""Print the demo roster a development session starts with."""

from roster.backend.src.core.config import get_settings
from roster.backend.src.services.session import RosterSession


def main() -> None:
    """Build a session from the environment and summarise its roster."""

    settings = get_settings()
    session = RosterSession.from_settings(settings)
    view = session.view()

    if view.is_roster_empty:
        print("Roster is empty (ROSTER_SEED_DEMO_DATA is disabled).")
        return

    print("✅ Development roster ready!")
    for student in view.students:
        print(
            f"{student.name} <{student.email}> "
            f"[id={student.id}, course={student.course}, grade={student.grade.value}, "
            f"status={student.status.value}]"
        )
    print()
    print(
        f"Total: {view.stats.total}  Active: {view.stats.active}  "
        f"A grades: {view.stats.grade_a}"
    )


if __name__ == "__main__":
    main()
