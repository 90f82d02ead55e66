"""STARTUPNET test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Port behaviour run against every adapter (memory, SQLite, PostgreSQL).
- integration/  : Real databases, migrations and the bootstrapped application.
- functional/   : User-visible CLI flows (``startupnet db ...``).
- e2e/          : Top-level CLI options: verbosity, logger levels, flight recorder.
- fixtures/     : Shared fixtures loaded through ``pytest_plugins`` (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Functional asserts user-observable results, not internals.
- Contract parametrizes implementations to ensure consistent behavior.
- PostgreSQL-backed tests are skipped when Docker is not available.
"""
