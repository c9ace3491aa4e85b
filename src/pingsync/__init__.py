"""pingsync - Declarative Pingdom checks.

Reconciles a desired list of checks (simple checks and TMS transaction
checks) against the live Pingdom account.
"""

__version__ = "0.3.0"
