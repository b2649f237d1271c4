"""Fashion adviser: dialog custom components backed by a remote decision service."""
