from fixtures.general import cache_path, cache_mock, client_mock, offline_env
from fixtures.w3 import w3_mock, erc20_client
from fixtures.caches import memory_cache, persistent_cache, cache_repo
from fixtures.tokens import tokens_service, offline_tokens_service
