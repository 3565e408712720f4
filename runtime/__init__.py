from __future__ import annotations

from .word_config_v1 import WORD_CONFIG, WORD_LIST, WordConfigV1, WordConfigError
from .glyph_atlas_v1 import GLYPH_DATA, GlyphPath, get_glyph
from .rng_v1 import DeterministicRNG, clamp, clamp01, lerp, smoothstep01

# Target layout primitive
from .word_layout_v1 import (
    WordPoint,
    layout_word_points,
    resample_glyph,
    densify_glyph,
    glyph_point_count,
    letter_count,
    letter_slots,
)

# Recruitment primitive (greedy, first-claim-wins)
from .particle_recruit_v1 import RecruitedParticle, recruit_pairs, recruit_particles

from .word_scheduler_v1 import (
    SessionMemory,
    new_session,
    anchor_session,
    record_inhale,
    trigger_probability,
    should_trigger,
    select_word,
    record_word,
    mark_word_shown,
)

from .formation_timeline_v1 import (
    IDLE,
    FORMING,
    WordFormationState,
    idle_state,
    begin_formation,
    advance,
    letter_progress,
)

from .word_formation_v1 import WordFormationController
