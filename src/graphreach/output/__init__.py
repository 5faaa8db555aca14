"""Output layer — renders ServiceResult as JSON, quiet text, or Rich text."""
