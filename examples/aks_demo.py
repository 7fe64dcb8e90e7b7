"""Example of configuring worker processes and certifying a prime."""

from aksprime import certify, configure


def main():
    configure(
        workers=4,
        deadline_s=120.0,
        time_job=True,
        progress_to_terminal=True,
    )

    result = certify(1_000_003)
    print(result)


if __name__ == "__main__":
    main()
