""" Simple payment engine.

Writing to stdout
Example::
payment-engine <NAME>.csv

Writing to file
Example::
payment-engine <NAME>.csv > <NAME>.csv

Rejected records are reported on stderr.
"""
import collections
import logging
import sys

import pandas

from payment_ledger.accounts import ClientsBalancesReporter
from payment_ledger.config import EngineConfig
from payment_ledger.errors import MalformedRecord, Reason
from payment_ledger.processor import Outcome, TransactionProcessor
from payment_ledger.transactions import FIELDS, cell_text, decode_record


def configure_logging(level):
    """Send diagnostics to stderr at the given level."""
    logging.basicConfig(format='%(levelname)s:%(message)s')
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))


class CmdParser:

    """Parse command line execution arguments."""

    def __init__(self, argv=None):
        self._data = sys.argv[1:] if argv is None else list(argv)
        self._input_file = ''
        self._update()

    def _update(self):
        if self._data:
            self._input_file = self._data[0]

    @property
    def input_file(self):
        """Get input file name."""
        return self._input_file


class CsvTransactionsReader:

    """Read transactions from csv.

    Every cell is kept as text; turning it into a typed record is left to
    ``decode_record`` so a bad row is rejected on its own instead of failing
    the whole read. Rows with too many fields keep their place in the input,
    with the surplus cells joined into the last column.

    The header is read as an ordinary row and checked here, so that pandas
    never takes a long first row for an index column.
    """

    COLUMNS = FIELDS + ('extra',)

    def __init__(self, path, chunksize=1):
        self._path = path
        self._chunksize = chunksize

    @classmethod
    def _on_bad_line(cls, fields):
        width = len(cls.COLUMNS) - 1
        return fields[:width] + [','.join(fields[width:])]

    def _get_record_from_file(self):
        reader = pandas.read_csv(self._path, header=None, names=self.COLUMNS, chunksize=self._chunksize,
                                 dtype=str, keep_default_na=False, skipinitialspace=True, engine='python',
                                 on_bad_lines=self._on_bad_line)
        header_seen = False
        with reader:
            for chunk in reader:
                if chunk.empty:
                    continue
                rows = chunk.itertuples(index=False, name=None)
                if not header_seen:
                    self._check_header(next(rows))
                    header_seen = True
                for row in rows:
                    yield self._trim(row)
        logging.info('All transactions read')

    @staticmethod
    def _check_header(row):
        header = tuple(cell_text(value).lower() for value in row)
        if header != FIELDS + ('',):
            raise ValueError(f'Unexpected header {header}, expected {FIELDS}')

    @staticmethod
    def _trim(row):
        row = list(row)
        if not cell_text(row[-1]):
            row.pop()
        return row

    def get(self):
        """Get chunk of data."""
        return self._get_record_from_file()


class Reporter:

    """Report data provided."""

    @staticmethod
    def write(data):
        """Write data provided."""
        print(data, flush=True)


class PaymentsEngine:

    """Handle payments."""

    def __init__(self, input_data, output, processor=None):
        self._input_data = input_data
        self._processor = TransactionProcessor() if processor is None else processor
        self._output = output
        self.outcomes = collections.Counter()

    @property
    def accounts(self):
        """Get the accounts updated by this run."""
        return self._processor.state.accounts

    def run(self):
        """Handle transactions."""
        for fields in self._input_data.get():
            outcome = self._handle_record(fields)
            self.outcomes[outcome.reason] += 1
            if not outcome.applied:
                logging.error('%s: %s; record %s', outcome.reason, outcome.detail, fields)

        logging.info('Applied %d records, rejected %d', self.outcomes[Reason.APPLIED],
                     sum(count for reason, count in self.outcomes.items() if reason != Reason.APPLIED))

        balances_reporter = ClientsBalancesReporter(self.accounts)

        self._output.write(balances_reporter.get_header())

        for balance in balances_reporter.get_balances():
            self._output.write(balance)

    def _handle_record(self, fields):
        try:
            transaction = decode_record(fields)
        except MalformedRecord as error:
            return Outcome(None, error.reason, str(error))
        return self._processor.process(transaction)


def main():
    """Run payment engine."""

    try:
        config = EngineConfig.from_env()
    except ValueError as error:
        configure_logging('ERROR')
        logging.error('Invalid configuration: %s', error)
        return 2
    configure_logging(config.log_level)

    parser = CmdParser()
    if not parser.input_file:
        logging.error('Usage: payment-engine <transactions.csv>')
        return 2

    bank = PaymentsEngine(CsvTransactionsReader(parser.input_file, config.chunksize), Reporter())
    try:
        bank.run()
    except (OSError, ValueError) as error:
        logging.error('Could not read %s: %s', parser.input_file, error)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
