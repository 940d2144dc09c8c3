""" look something up on isbndb.com from the command line """
from itertools import islice

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from isbndb_model import model_manager
from isbndb_model.agents import AgentException
from isbndb_model.models import ResourceKind


def parse_terms(terms):
    """turn name=value pairs into search args"""
    args = {}
    for term in terms:
        name, sep, value = term.partition("=")
        if not sep or not name:
            raise CommandError(f"Search terms look like name=value, not {term}")
        args[name] = value
    return args


# pylint: disable=no-self-use
# pylint: disable=unused-argument
class Command(BaseCommand):
    """command-line options"""

    help = "Find or search for records on isbndb.com"

    def add_arguments(self, parser):
        """what to look for"""
        parser.add_argument(
            "kind",
            choices=[kind.tag for kind in ResourceKind],
            help="The kind of record",
        )
        parser.add_argument(
            "terms",
            nargs="+",
            help="An id (or ISBN) to find, or name=value pairs with --search",
        )
        parser.add_argument(
            "--search",
            action="store_true",
            help="Search instead of finding a single record",
        )
        parser.add_argument(
            "--limit",
            type=int,
            default=10,
            help="How many search results to show",
        )

    def handle(self, *args, **options):
        """run the lookup through the configured model"""
        kind = ResourceKind[options["kind"].upper()]
        if options["limit"] < 0:
            raise CommandError("--limit can't be negative")

        try:
            model = model_manager.get_model()
            if options["search"]:
                results = getattr(model, f"search_{kind.plural}")(
                    parse_terms(options["terms"])
                )
                for result in islice(results, options["limit"]):
                    self.stdout.write(str(result))
                return

            if len(options["terms"]) > 1:
                raise CommandError("Only one id can be looked up at a time")
            result = getattr(model, f"find_{kind.tag}")(options["terms"][0])
        except (AgentException, ImproperlyConfigured, ImportError) as err:
            raise CommandError(str(err)) from err

        if result is None:
            self.stdout.write("No match")
        else:
            self.stdout.write(str(result))
