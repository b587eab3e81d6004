import sys
from pathlib import Path

from voter_browser.core.sample_data import generate_sample_voters
from voter_browser.core.voter import VOTER_COLUMNS, voters_to_frame
from voter_browser.services.export_service import voters_to_csv

n_voters = int(sys.argv[1]) if len(sys.argv) > 1 else 1000

frame = voters_to_frame(generate_sample_voters(n_voters, seed=2024))

Path("data").mkdir(exist_ok=True)
Path("data/mock_voters.csv").write_text(voters_to_csv(frame, columns=VOTER_COLUMNS) + "\n")
print("wrote data/mock_voters.csv", frame.shape)
