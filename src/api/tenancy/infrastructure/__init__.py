"""Tenancy infrastructure adapters."""

from tenancy.infrastructure.business_directory import SupabaseBusinessDirectory

__all__ = ["SupabaseBusinessDirectory"]
