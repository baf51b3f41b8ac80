''' Page cache helpers '''
import logging

from flask import request

from dashboard import cache

def _path_key(path: str) -> str:
    return 'view/' + (path.rstrip('/') or '/')

def view_cache_key():
    '''Cache key of the view serving current request. Used as `key_prefix` of cached views'''
    return _path_key(request.path)

def revalidate_path(path: str):
    '''Drops cached page of the view at `path` so the next request renders it anew'''
    logging.getLogger('revalidate_path()').debug("Invalidating %s", path)
    cache.delete(_path_key(path))
