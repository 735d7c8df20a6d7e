"""Curated compatibility readings keyed by sorted sign pair ("Aries-Leo")."""

from typing import Dict, List

ORACLE_READINGS: Dict[str, str] = {
    "Aries-Aries": "When two Aries souls collide, the universe feels the spark! Your energy together is like a double flame—passionate, direct, and endlessly dynamic. You understand each other's need for independence and adventure without explanation. Together, you're unstoppable pioneers, though you may need to take turns leading. The key to your harmony lies in channeling your shared fire toward common goals rather than competing for the spotlight.",
    "Aries-Leo": "Fire meets fire in the most magnificent way! The Ram and the Lion create a connection that radiates warmth and vitality to everyone around you. Aries brings the spark of initiation while Leo sustains it with generous heart-fire. You inspire each other to be bolder, brighter versions of yourselves. Your energy together feels like a celebration of life itself.",
    "Aries-Libra": "Opposites on the zodiac wheel, yet magnetically drawn together. Aries brings courage and directness; Libra offers grace and perspective. Where Aries charges forward, Libra considers all angles. This dance of self and other creates a beautiful balance when you appreciate what each brings. Together, you learn that independence and partnership can coexist harmoniously.",
    "Cancer-Taurus": "Earth and Water blend into fertile ground for deep emotional security. The Bull offers steadfast presence while the Crab nurtures with intuitive care. Together, you create a sanctuary—a place where both of you feel truly safe to be yourselves. Your energy together feels like coming home after a long journey, warm and deeply nourishing.",
    "Taurus-Virgo": "Two Earth signs finding perfect rhythm together. There's a quiet understanding between you that doesn't need many words. Taurus brings sensual appreciation of life's pleasures; Virgo adds thoughtful attention to making things work beautifully. Your practical magic together can build lasting foundations for dreams to flourish.",
    "Gemini-Libra": "Air signs in delightful conversation! The Twins and the Scales create a connection filled with ideas, laughter, and social grace. You stimulate each other's minds endlessly, finding joy in exploring concepts and connecting with others. Your energy together feels like a sparkling salon where wisdom and wit dance freely.",
    "Gemini-Sagittarius": "Opposite signs with a shared love of learning and exploration! Gemini gathers fascinating details while Sagittarius seeks the bigger picture. Together, you're eternal students of life, inspiring each other to ask better questions and venture further. Your energy creates an endless adventure of the mind and spirit.",
    "Cancer-Scorpio": "Water meeting water in profound emotional depths. The Crab and the Scorpion share an intuitive language that goes beyond words. You feel each other's moods and needs almost psychically. Together, you create emotional intimacy that many only dream of. Your bond is a safe harbor in life's storms.",
    "Cancer-Pisces": "The gentlest, most nurturing of connections. Both Water signs, you flow together with remarkable ease. Cancer offers protective care while Pisces brings transcendent compassion. Your energy together feels like a warm embrace that heals old wounds. In each other, you find someone who truly understands the language of the heart.",
    "Leo-Sagittarius": "Fire signs celebrating life together! The Lion's creative warmth meets the Archer's adventurous spirit in a connection full of joy and optimism. You encourage each other's dreams and laugh together often. Your energy radiates such positivity that others are drawn to your light. Together, everything feels possible.",
    "Capricorn-Virgo": "Earth signs building something meaningful together. The Maiden's attention to detail complements the Goat's ambitious vision. You share practical values and a deep appreciation for effort and quality. Your energy together feels reliable and productive—you accomplish so much when you collaborate with shared purpose.",
    "Aquarius-Libra": "Air signs in harmonious intellectual connection. Libra's grace and diplomacy pairs beautifully with Aquarius's innovative vision. You share ideals about fairness and progress, inspiring each other toward making the world more beautiful and just. Your energy together feels like a meeting of minds with heart.",
    "Pisces-Scorpio": "The deepest waters of the zodiac meeting in profound connection. Scorpio's intensity finds a soft landing in Pisces' compassion, while Pisces discovers strength in Scorpio's unwavering loyalty. Together, you explore emotional and spiritual realms that few others can access. Your bond transcends the ordinary.",
    "Aquarius-Sagittarius": "Fire and Air creating expansive possibilities! The Archer's philosophical quest meets the Water Bearer's humanitarian vision. You share a love of freedom and ideas that push boundaries. Your energy together feels revolutionary—like two visionaries dreaming up a better future over endless conversations.",
}

STRENGTHS: Dict[str, List[str]] = {
    "Aries-Leo": [
        "Mutual admiration and genuine celebration of each other's wins",
        "Shared enthusiasm that makes every day feel like an adventure",
        "Natural leadership abilities that complement rather than compete",
        "A warm, generous connection that radiates joy to others",
    ],
    "Cancer-Scorpio": [
        "Profound emotional understanding without needing explanations",
        "Fierce loyalty and protective instincts for each other",
        "Intuitive communication that borders on the telepathic",
        "Creating deep security and trust that allows vulnerability",
    ],
    "Gemini-Libra": [
        "Endless fascinating conversations that never grow stale",
        "Shared social grace that makes you a beloved pair",
        "Intellectual stimulation that keeps you both sharp and curious",
        "A lightness and charm that makes difficult times easier",
    ],
    "Taurus-Virgo": [
        "Shared appreciation for quality, beauty, and craftsmanship",
        "Practical teamwork that accomplishes real-world goals",
        "Reliability and consistency that builds deep trust",
        "A grounded approach to life that feels stable and secure",
    ],
}

GROWTH_OPPORTUNITIES: Dict[str, List[str]] = {
    "Aries-Leo": [
        "Learning to share the spotlight graciously",
        "Developing patience when neither wants to compromise",
        "Balancing individual ambitions with shared goals",
    ],
    "Cancer-Scorpio": [
        "Allowing space for lighter moments amidst the intensity",
        "Processing emotions openly rather than holding onto hurts",
        "Trusting that vulnerability strengthens rather than weakens the bond",
    ],
    "Gemini-Libra": [
        "Moving from ideas to committed action together",
        "Addressing conflicts directly rather than keeping things light",
        "Grounding your mental connection with physical presence",
    ],
    "Taurus-Virgo": [
        "Embracing spontaneity and unexpected changes together",
        "Releasing perfectionism in favor of progress",
        "Adding more playfulness to your practical partnership",
    ],
}

POETIC_SUMMARIES: Dict[str, str] = {
    "Aries-Leo": "Two flames dancing together, creating light that warms all who witness it.",
    "Cancer-Scorpio": "Deep calls to deep—two souls who've found their sanctuary in each other.",
    "Gemini-Libra": "Minds in flight together, weaving words into wings of shared wonder.",
    "Taurus-Virgo": "Roots intertwined beneath the surface, growing stronger with each season.",
    "Aries-Libra": "The spark and the mirror, teaching each other the art of self and other.",
    "Cancer-Taurus": "A garden of comfort, where love blooms in safety and care.",
    "Leo-Sagittarius": "Adventurers of the heart, setting the world ablaze with joy.",
    "Pisces-Scorpio": "Ocean depths where two souls swim as one through mystery and magic.",
}

NURTURING_ADVICE: Dict[str, str] = {
    "Aries-Leo": "Celebrate each other loudly and often. Plan adventures that let you both shine. When egos clash, remember that you're on the same team—redirect that fire toward a shared challenge.",
    "Cancer-Scorpio": "Create rituals of emotional check-ins where honesty flows freely. Your depth is your gift—honor it with quality time that allows real intimacy to unfold.",
    "Gemini-Libra": "Keep the conversation flowing but also create quiet moments of just being together. Your mental connection thrives when balanced with physical presence and touch.",
    "Taurus-Virgo": "Schedule regular 'appreciation sessions' where you acknowledge each other's efforts. Break routine occasionally with unexpected pleasures—you both deserve more play.",
    "Aries-Libra": "Practice the art of taking turns—sometimes leading, sometimes following. Your opposite natures are your greatest teachers when approached with curiosity instead of frustration.",
}
