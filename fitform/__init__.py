"""FitForm AI session backend."""
