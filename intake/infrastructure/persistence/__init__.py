from .supabase_client import SupabaseRecordStore, create_record_store

__all__ = ["SupabaseRecordStore", "create_record_store"]
