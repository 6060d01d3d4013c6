import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]

DOMAIN_TEST_PATHS = [
    "tests/catalogue/domain/",
    "tests/ordering/domain/",
    "tests/identity/domain/",
    "tests/payments/domain/",
    "tests/notifications/domain/",
]


def _install(session: nox.Session) -> None:
    """Install the project with all test extras into the nox virtualenv."""
    session.run(
        "poetry",
        "install",
        "--all-extras",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest")


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no command processing)."""
    _install(session)
    session.run("pytest", *DOMAIN_TEST_PATHS)


@nox.session(python=PYTHON_VERSIONS[-1])
def walkthrough(session: nox.Session) -> None:
    """Run every design walkthrough end to end."""
    _install(session)
    session.run("storefront", "all")
