"""Resume site contact-form service."""
