"""External collaborators: version control, release host, cold storage."""
