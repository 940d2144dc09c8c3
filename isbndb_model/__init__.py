""" isbndb.com lookups for django apps """
