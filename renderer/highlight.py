"""세그먼트 하이라이트 스타일 계산"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from schema.schemas import Segment


@dataclass(frozen=True)
class SegmentColor:
    bg: str
    text: str
    border: str

    def classes(self) -> str:
        return f"{self.bg} {self.text} {self.border}"


# matchId 순서대로 순환하는 팔레트 (팔레트 크기를 넘으면 색이 겹칠 수 있음)
SEGMENT_COLORS: List[SegmentColor] = [
    SegmentColor("bg-red-500/20", "text-red-200", "border-red-500/40"),
    SegmentColor("bg-orange-500/20", "text-orange-200", "border-orange-500/40"),
    SegmentColor("bg-amber-500/20", "text-amber-200", "border-amber-500/40"),
    SegmentColor("bg-yellow-500/20", "text-yellow-200", "border-yellow-500/40"),
    SegmentColor("bg-lime-500/20", "text-lime-200", "border-lime-500/40"),
    SegmentColor("bg-green-500/20", "text-green-200", "border-green-500/40"),
    SegmentColor("bg-emerald-500/20", "text-emerald-200", "border-emerald-500/40"),
    SegmentColor("bg-teal-500/20", "text-teal-200", "border-teal-500/40"),
    SegmentColor("bg-cyan-500/20", "text-cyan-200", "border-cyan-500/40"),
    SegmentColor("bg-sky-500/20", "text-sky-200", "border-sky-500/40"),
    SegmentColor("bg-blue-500/20", "text-blue-200", "border-blue-500/40"),
    SegmentColor("bg-indigo-500/20", "text-indigo-200", "border-indigo-500/40"),
    SegmentColor("bg-violet-500/20", "text-violet-200", "border-violet-500/40"),
    SegmentColor("bg-purple-500/20", "text-purple-200", "border-purple-500/40"),
    SegmentColor("bg-fuchsia-500/20", "text-fuchsia-200", "border-fuchsia-500/40"),
    SegmentColor("bg-pink-500/20", "text-pink-200", "border-pink-500/40"),
    SegmentColor("bg-rose-500/20", "text-rose-200", "border-rose-500/40"),
]

NEUTRAL_COLOR = SegmentColor("bg-slate-800/50", "text-slate-400", "border-transparent")

BASE_CLASSES = (
    "inline-block px-1.5 py-0.5 mx-0.5 my-1 rounded border cursor-pointer "
    "transition-all duration-200 text-sm md:text-base font-medium select-none"
)


class HighlightState(str, Enum):
    NEUTRAL = "neutral"
    NORMAL = "normal"
    HOVERED = "hovered"
    DIMMED = "dimmed"


STATE_CLASSES = {
    HighlightState.NEUTRAL: "opacity-60",
    HighlightState.NORMAL: "",
    HighlightState.HOVERED: "ring-2 ring-offset-2 ring-offset-slate-900 ring-brand-500 scale-110 shadow-lg z-10",
    HighlightState.DIMMED: "opacity-30 grayscale",
}


def is_linked(match_id: int) -> bool:
    """양수 matchId만 다른 언어와 연결된 것으로 간주 (음수는 0과 동일하게 취급)"""
    return match_id > 0


def color_index(match_id: int) -> int:
    """matchId -> 팔레트 인덱스, 연결되지 않은 세그먼트는 -1"""
    if not is_linked(match_id):
        return -1
    return (match_id - 1) % len(SEGMENT_COLORS)


def color_for(match_id: int) -> SegmentColor:
    index = color_index(match_id)
    return SEGMENT_COLORS[index] if index >= 0 else NEUTRAL_COLOR


def segment_state(segment: Segment, hovered_match_id: Optional[int]) -> HighlightState:
    """
    세그먼트의 표시 상태 계산

    - matchId가 0 이하이면 hover 여부와 관계없이 NEUTRAL
    - hover 중인 matchId와 같으면 HOVERED
    - 다른 matchId가 hover 중이면 DIMMED
    - hover가 없으면 NORMAL
    """
    if not is_linked(segment.match_id):
        return HighlightState.NEUTRAL
    if hovered_match_id is None:
        return HighlightState.NORMAL
    if hovered_match_id == segment.match_id:
        return HighlightState.HOVERED
    return HighlightState.DIMMED


def state_classes(match_id: int, state: HighlightState) -> str:
    color = color_for(match_id)
    extra = STATE_CLASSES[state]
    return f"{BASE_CLASSES} {color.classes()} {extra}".strip()


def segment_classes(segment: Segment, hovered_match_id: Optional[int]) -> str:
    """세그먼트에 적용할 전체 CSS 클래스 문자열"""
    return state_classes(segment.match_id, segment_state(segment, hovered_match_id))


@dataclass
class SegmentView:
    """템플릿 렌더링용 세그먼트 정보 (브라우저에서 상태별 클래스를 교체할 수 있도록 미리 계산)"""
    text: str
    match_id: int
    state: HighlightState
    classes: str
    normal_classes: str
    hovered_classes: str
    dimmed_classes: str


def render_segment_view(segment: Segment, hovered_match_id: Optional[int] = None) -> SegmentView:
    state = segment_state(segment, hovered_match_id)
    if state is HighlightState.NEUTRAL:
        neutral = state_classes(segment.match_id, HighlightState.NEUTRAL)
        return SegmentView(segment.text, segment.match_id, state, neutral, neutral, neutral, neutral)
    return SegmentView(
        text=segment.text,
        match_id=segment.match_id,
        state=state,
        classes=state_classes(segment.match_id, state),
        normal_classes=state_classes(segment.match_id, HighlightState.NORMAL),
        hovered_classes=state_classes(segment.match_id, HighlightState.HOVERED),
        dimmed_classes=state_classes(segment.match_id, HighlightState.DIMMED),
    )


def render_segments(segments: List[Segment], hovered_match_id: Optional[int] = None) -> List[SegmentView]:
    return [render_segment_view(segment, hovered_match_id) for segment in segments]
