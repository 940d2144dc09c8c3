""" bring all the models into the app namespace """
from .isbndb import ISBNDBModel, ResourceKind
