"""CLIENTELE test suite.

Folder taxonomy
- unit/         : One module, class or function at a time, with fakes at the seams.
- contract/     : Behavior every implementation of a port must share.
- integration/  : Adapters and the composition root wired together.
- e2e/          : The `clientele` CLI driven through Click's CliRunner.

Every test is marked with its folder name (see `conftest.py`), so
``pytest -m unit`` runs only the fast suite. Hypothesis tests live beside the
code they exercise and are additionally marked ``property``.
"""
