"""Christ Collective interaction ledger and notification service.

Ensures the local ``christ_collective`` package takes precedence over
namespace package resolution.
"""
