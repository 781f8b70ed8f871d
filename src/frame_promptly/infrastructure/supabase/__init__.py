from .supabase_functions_client import SupabaseFunctionsClient
from .supabase_rest_repository import SupabaseRestRepository

__all__ = ["SupabaseFunctionsClient", "SupabaseRestRepository"]
