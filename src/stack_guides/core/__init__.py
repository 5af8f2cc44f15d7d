"""Build pipeline: frontmatter parsing, markdown rendering, snapshot assembly."""
