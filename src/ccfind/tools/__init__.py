"""
Workspace tools for ccfind.

Folder resolution, file discovery, link building, interactive selection and
the external browser and text search delegates.
"""
