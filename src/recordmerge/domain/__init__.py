"""Entity reconciliation core: record model, differ, merger and reconciler."""
