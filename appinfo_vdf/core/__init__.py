"""Binary appinfo.vdf decoding: cursor, nodes, entries and documents."""
