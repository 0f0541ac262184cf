"""
domain
------

Planning entities and solutions of the supported problems: `election`,
`roster` and `flp` (facility location).
"""
