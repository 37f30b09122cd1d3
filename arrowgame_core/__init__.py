"""
Arrow game core Python package.

Pure rules and resolution engine for the 5x5 arrow puzzle. Presentation,
animation timing and storage live outside this package.
Modules:
- arrows.py: arrow values, tiers and partner table
- board.py: Board and coordinate helpers
- edges.py: wrap-around check for linear distances
- actions.py: merge / combine / cancel classification
- moves.py: single-move resolution and gravity scheduling
- gravity.py: column settling as SettleStep sequences
- oracle.py: end-of-game search
- state.py, session.py: session state and gesture handling
- deal.py, snapshot.py, config.py, cli.py
"""
