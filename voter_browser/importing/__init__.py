from .csv_import import ParsedVoters, parse_voter_csv, placeholder_picture

__all__ = ["ParsedVoters", "parse_voter_csv", "placeholder_picture"]
