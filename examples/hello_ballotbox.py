import logging

import ballotbox


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    server = ballotbox.run(port=0, new_server=True)
    print(f"ballotbox at {server.url}")

    alice = server._as_client("alice")
    alice.register_user("Alice")

    park = alice.create_proposal("Build a park")
    library = alice.create_proposal("Extend library hours")
    alice.register_candidate("Alice", "More green space")

    for voter in ["bob", "carol", "dave"]:
        c = alice.as_identity(voter)
        c.register_user(voter.title())
        c.cast_vote(park)
    alice.cast_vote(library)

    for p in alice.list_proposals():
        print(f"#{p.id} {p.description}: {p.votes} vote(s)")


if __name__ == "__main__":
    main()
