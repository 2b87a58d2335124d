"""Terminal output for the stencil CLI."""
