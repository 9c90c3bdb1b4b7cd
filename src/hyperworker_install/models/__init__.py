"""Data models for hyperworker-install.

Import from submodules:
- options: InstallOptions
- results: FileManifestEntry, SkillsReport, MergeResult, GitignoreResult, InstallResults
"""
