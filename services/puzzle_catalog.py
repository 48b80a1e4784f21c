"""
PuzzleCatalog：隊伍 -> 謎題組的對應

規則：
- 具名隊伍（ALPHA、BETA...）直接對應同名謎題組
- 其他隊伍取識別碼中的數字 n，使用 catalog[n % len(catalog)]

任何識別碼都會拿到一組謎題，隊伍數超過謎題組數時會有隊伍共用同一組。
"""
from typing import Dict, List, Mapping, Optional, Tuple

from models import Level, NodeSession, PuzzleSet
from services.naming_service import is_node1, team_number
from services.puzzle_sets import PUZZLE_SETS


class PuzzleCatalog:
    """唯讀的謎題目錄"""

    def __init__(self, puzzle_sets: Optional[Mapping[str, PuzzleSet]] = None):
        puzzle_sets = PUZZLE_SETS if puzzle_sets is None else puzzle_sets
        if not puzzle_sets:
            raise ValueError("PuzzleCatalog requires at least one puzzle set")
        self._by_key: Dict[str, PuzzleSet] = {k.upper(): v for k, v in puzzle_sets.items()}
        # 循環分配依宣告順序
        self._ordered: List[PuzzleSet] = list(self._by_key.values())

    def __len__(self) -> int:
        return len(self._ordered)

    @property
    def team_keys(self) -> Tuple[str, ...]:
        return tuple(self._by_key)

    def resolve(self, team_id: str) -> PuzzleSet:
        """
        取得隊伍的謎題組

        參數：
            team_id: 已正規化的隊伍識別碼

        返回：
            PuzzleSet（永遠不會找不到）

        範例：
            resolve("ALPHA") -> ALPHA 的謎題組
            resolve("TEAM12") -> catalog[12 % 10] = GAMMA
        """
        puzzle_set = self._by_key.get(team_id)
        if puzzle_set is not None:
            return puzzle_set
        return self._ordered[team_number(team_id) % len(self._ordered)]

    def level_for(self, puzzle_set: PuzzleSet, node_id: str, level: int) -> Level:
        """
        取得節點在某一關的 Level

        關卡編號從 1 開始，超出範圍時夾到頭尾（正常流程不會發生）
        """
        levels = puzzle_set.node1_levels if is_node1(node_id) else puzzle_set.node2_levels
        index = max(1, min(level, len(levels))) - 1
        return levels[index]

    def level_for_session(self, session: NodeSession) -> Level:
        return self.level_for(self.resolve(session.team_id), session.node_id, session.current_level)

    def cipher_type_for(self, team_id: str, node_id: str) -> str:
        """節點最終關的密碼類型（憑證表用）"""
        puzzle_set = self.resolve(team_id)
        return puzzle_set.node1_type if is_node1(node_id) else puzzle_set.node2_type
