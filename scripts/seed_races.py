"""Seed dummy races into the database."""
from racing import db
from racing.race import RacesRepository


def main():
    with db.get_connection() as conn:
        repo = RacesRepository(conn)
        repo.init()
        races = repo.list()

    open_races = sum(1 for r in races if r.status.value == "OPEN")
    print(f"Races in store: {len(races)} ({open_races} open)")


if __name__ == "__main__":
    main()
