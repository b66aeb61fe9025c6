"""skdocs syntax cache: fetch the addon syntax list once, serve it from memory."""
