from pollsim.voter.voter import Voter, VoterState

__all__ = ["Voter", "VoterState"]
