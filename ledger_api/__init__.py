"""Session Ledger API — session-scoped credit/debit ledger over HTTP."""
