"""Static weekly horoscope entries and planetary transit blurbs.

Each sign has two entries that alternate by week number. Transits rotate in
five weekly slots of two.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Horoscope:
    sign: str
    weekly_reading: str
    love_advice: str
    career_advice: str
    lucky_number: int
    lucky_color: str
    compatibility: str
    mood: str
    celestial_insight: str


@dataclass(frozen=True)
class PlanetaryTransit:
    planet: str
    emoji: str
    aspect: str
    description: str
    advice: str


DEFAULT_READINGS: Tuple[Horoscope, ...] = (
    Horoscope(
        sign="Aries",
        weekly_reading="The stars align in your favor this week.",
        love_advice="Open your heart to new possibilities.",
        career_advice="Take initiative on that project you've been postponing.",
        lucky_number=7,
        lucky_color="Red",
        compatibility="Leo",
        mood="Energetic",
        celestial_insight="The cosmos supports bold moves—trust your instincts and take the lead.",
    ),
)


HOROSCOPE_READINGS: Dict[str, Tuple[Horoscope, ...]] = {
    "Aries": (
        Horoscope(
            "Aries",
            "Your fiery energy is at its peak this week. Bold moves in your career could lead to unexpected rewards. Trust your instincts when making decisions—they won't lead you astray. A conversation with a friend might reveal a new perspective you hadn't considered.",
            "Passion runs high. If single, someone magnetic may enter your orbit. If attached, plan something spontaneous.",
            "Leadership opportunities are coming. Don't shy away from taking charge.",
            9, "Crimson", "Sagittarius", "Adventurous",
            "With Mars amplifying your natural fire, channel this surge into meaningful pursuits. The cosmic warriors favor those who act with both courage and compassion.",
        ),
        Horoscope(
            "Aries",
            "Mars energizes your communication sector, making this an excellent time for important conversations. Your natural charisma is amplified—use it wisely. Financial matters require careful attention; avoid impulsive purchases.",
            "Express your feelings openly. Vulnerability can deepen connections.",
            "Networking events favor you. Make those connections count.",
            3, "Orange", "Leo", "Confident",
            "Mercury's dance with your ruling planet Mars sharpens your words into arrows of truth. Speak boldly, but aim with intention—your voice carries extra power now.",
        ),
    ),
    "Taurus": (
        Horoscope(
            "Taurus",
            "Venus graces your sign, bringing harmony and beauty into your daily life. This is a wonderful time for self-care and indulgence. Financial stability improves, but don't rest on your laurels—keep building your foundation.",
            "Romance blooms through shared experiences. Plan a cozy evening in.",
            "Steady progress beats rushing. Your patience will be rewarded.",
            6, "Emerald Green", "Virgo", "Content",
            "Venus, your ruling planet, bathes you in her gentle light. Embrace sensory pleasures guilt-free—a beautiful meal, soft music, or time in nature replenishes your soul.",
        ),
        Horoscope(
            "Taurus",
            "Your practical nature serves you well as complex situations arise. Others look to you for stability and wisdom. A creative project may capture your attention—give it the time it deserves.",
            "Physical affection strengthens bonds. Don't underestimate the power of touch.",
            "Your reliability is noticed. A reward or recognition may come your way.",
            4, "Rose", "Cancer", "Grounded",
            "The Earth trines between planets support your natural steadfastness. Plant seeds now—both literal and metaphorical—and watch them flourish with patient nurturing.",
        ),
    ),
    "Gemini": (
        Horoscope(
            "Gemini",
            "Mercury's influence sparks your intellectual curiosity. New information comes your way that could change your perspective on something important. Social gatherings are favored—your wit and charm will be in high demand.",
            "Mental connection matters most now. Engage in deep conversations.",
            "Your adaptability is your superpower. Multiple projects? You've got this.",
            5, "Yellow", "Libra", "Curious",
            "Mercury wings through favorable aspects, accelerating your thoughts and conversations. Write down your ideas—they're coming faster than usual and deserve to be captured.",
        ),
        Horoscope(
            "Gemini",
            "The twin energy within you seeks balance. Take time to integrate your different sides. Short trips or local adventures could bring unexpected joy and inspiration.",
            "Variety keeps things fresh. Try something new together.",
            "Communication skills shine. Present your ideas with confidence.",
            11, "Silver", "Aquarius", "Playful",
            "Air signs are harmonizing in the cosmos, creating a symphony of mental clarity. Your dual nature is a gift—let both sides of yourself express and explore.",
        ),
    ),
    "Cancer": (
        Horoscope(
            "Cancer",
            "The Moon highlights your emotional intelligence. Trust your intuition—it's sharper than ever. Home and family matters take center stage. Creating a nurturing environment brings deep satisfaction.",
            "Emotional security is paramount. Create safe spaces for vulnerable sharing.",
            "Your empathetic leadership style wins support from colleagues.",
            2, "Pearl White", "Scorpio", "Nurturing",
            "The Moon, your celestial mother, whispers secrets only you can hear. Create a cozy sanctuary and let your intuition speak—it knows the way forward.",
        ),
        Horoscope(
            "Cancer",
            "Your protective shell serves you well, but don't retreat entirely. Someone needs your compassion this week. Financial intuition is strong—trust your gut on investments.",
            "Past wounds may surface for healing. Approach them with self-compassion.",
            "Creative projects flourish. Let your imagination guide you.",
            7, "Moonstone Blue", "Pisces", "Reflective",
            "Water signs receive Neptune's blessing this week. Your emotional depth is your superpower—don't hide from feelings, let them flow like healing waters.",
        ),
    ),
    "Leo": (
        Horoscope(
            "Leo",
            "The Sun, your ruling planet, amplifies your natural radiance. This is your time to shine! Creative pursuits and self-expression bring joy. Recognition for your efforts is on the horizon.",
            "Grand romantic gestures are favored. Make your loved one feel special.",
            "Step into the spotlight. Your talents deserve to be seen.",
            1, "Gold", "Aries", "Radiant",
            "The Sun blazes in harmony with Jupiter, expanding your natural warmth and charisma. Your light illuminates others—share it generously, and watch abundance return tenfold.",
        ),
        Horoscope(
            "Leo",
            "Your generous heart attracts abundance. Share your warmth with others, but remember to reserve some energy for yourself. A child or creative project may bring unexpected joy.",
            "Loyalty is tested and proven. Your devotion inspires others.",
            "Leadership roles suit you now. Others look to you for direction.",
            8, "Amber", "Sagittarius", "Generous",
            "Venus graces your sign with artistic inspiration. Create something beautiful—whether art, music, or memorable moments with loved ones. Your heart is the compass.",
        ),
    ),
    "Virgo": (
        Horoscope(
            "Virgo",
            "Mercury sharpens your analytical mind. Details that others miss are crystal clear to you. Health and wellness routines bring positive results. Organization brings peace of mind.",
            "Show love through acts of service. Small gestures mean everything.",
            "Your attention to detail saves the day. Excellence is noticed.",
            5, "Forest Green", "Taurus", "Productive",
            "Mercury trines Saturn, blessing your meticulous nature with cosmic support. Your careful planning manifests real results—trust your process and watch order emerge from chaos.",
        ),
        Horoscope(
            "Virgo",
            "Your perfectionist tendencies can be channeled positively this week. A project reaches completion with your careful guidance. Don't forget to celebrate small victories.",
            "Release the need for perfection in relationships. Embrace beautiful imperfection.",
            "Systems and processes you create will have lasting impact.",
            3, "Sage", "Capricorn", "Methodical",
            "Earth energy grounds the cosmic flow this week. Your practical wisdom is needed—share your insights while remembering that sometimes 'good enough' is perfect.",
        ),
    ),
    "Libra": (
        Horoscope(
            "Libra",
            "Venus enhances your natural grace and diplomacy. Relationships of all kinds benefit from your balanced approach. Beauty and art inspire you—visit a gallery or create something yourself.",
            "Partnership harmony is achievable. Compromise comes naturally.",
            "Collaboration over competition wins the day.",
            6, "Soft Pink", "Gemini", "Harmonious",
            "Venus forms a gentle trine with Neptune, heightening your aesthetic sensibilities and romantic imagination. Surround yourself with beauty—it feeds your soul and inspires your best self.",
        ),
        Horoscope(
            "Libra",
            "Your scales tip toward justice this week. Stand up for what's right, even when it's uncomfortable. Social invitations abound—choose the ones that truly nourish your soul.",
            "Balance giving and receiving in love. You deserve reciprocity.",
            "Negotiation skills are sharp. Close that deal with confidence.",
            2, "Lavender", "Aquarius", "Diplomatic",
            "Mars energizes your partnerships sector, adding passion to diplomacy. Your natural balance becomes dynamic—use this energy to advocate for fairness with fire.",
        ),
    ),
    "Scorpio": (
        Horoscope(
            "Scorpio",
            "Pluto's transformative energy runs deep. Old patterns ready to be released make way for powerful new beginnings. Your intensity attracts others—use this magnetism wisely.",
            "Deep emotional bonds strengthen. Intimacy reaches new levels.",
            "Research and investigation reveal important truths.",
            8, "Burgundy", "Cancer", "Intense",
            "Pluto, your ruling planet, harmonizes with the transformative currents flowing through the cosmos. Shed what no longer serves you like a phoenix—rebirth awaits on the other side.",
        ),
        Horoscope(
            "Scorpio",
            "Your regenerative powers are strong. What seemed impossible becomes achievable through sheer determination. Secrets may be revealed—handle them with your characteristic discretion.",
            "Trust is earned through consistency. Show up for your loved ones.",
            "Strategic thinking gives you an edge. Play the long game.",
            13, "Black", "Pisces", "Powerful",
            "Mars fuels your investigative powers while Neptune deepens your intuition. Trust the mysteries that call to you—your ability to see beneath surfaces is a gift.",
        ),
    ),
    "Sagittarius": (
        Horoscope(
            "Sagittarius",
            "Jupiter expands your horizons. Travel, education, or philosophical pursuits call to you. Your optimism is contagious—spread it generously. Adventure awaits around every corner.",
            "Freedom within commitment is possible. Discuss boundaries openly.",
            "Big-picture thinking impresses higher-ups. Share your vision.",
            9, "Royal Purple", "Aries", "Optimistic",
            "Jupiter, your magnificent ruler, expands everything it touches. Aim your arrow at the stars—the cosmos supports bold visions and big dreams. Your optimism is medicine for the world.",
        ),
        Horoscope(
            "Sagittarius",
            "Your arrow aims true this week. Goals that seemed distant are within reach. Foreign connections or international opportunities may present themselves.",
            "Honesty, even when uncomfortable, strengthens relationships.",
            "Teaching or mentoring roles suit you now. Share your wisdom.",
            7, "Turquoise", "Leo", "Adventurous",
            "Fire trines activate your natural enthusiasm. Share your hard-won wisdom with others—your experiences contain lessons that can light another's path.",
        ),
    ),
    "Capricorn": (
        Horoscope(
            "Capricorn",
            "Saturn rewards your discipline and hard work. Long-term goals see tangible progress. Your reputation for reliability opens new doors. Structure brings comfort rather than constraint.",
            "Show your softer side. Vulnerability is strength, not weakness.",
            "Career advancement is likely. Your efforts are finally recognized.",
            4, "Charcoal", "Virgo", "Ambitious",
            "Saturn, your wise taskmaster, trines supportive planets. Your patient efforts are crystallizing into lasting achievement. The mountain you're climbing has a view worth every step.",
        ),
        Horoscope(
            "Capricorn",
            "The mountain goat climbs steadily upward. Each step, no matter how small, brings you closer to the summit. Authority figures look favorably upon you.",
            "Quality time matters more than grand gestures. Be present.",
            "Long-term planning pays dividends. Think five years ahead.",
            10, "Navy", "Taurus", "Determined",
            "Pluto continues its transformative journey through your sign, urging authentic power. Build legacies, not just success—what you create now echoes into the future.",
        ),
    ),
    "Aquarius": (
        Horoscope(
            "Aquarius",
            "Uranus sparks innovation and originality. Your unique perspective is your greatest asset. Community involvement brings fulfillment. Technology and future-thinking ideas flow freely.",
            "Friendship is the foundation of lasting love. Cultivate it.",
            "Revolutionary ideas are welcomed. Don't hold back your vision.",
            11, "Electric Blue", "Libra", "Innovative",
            "Uranus electrifies your sector of self-expression with brilliant flashes of insight. Your unconventional ideas are ahead of their time—share them fearlessly with your community.",
        ),
        Horoscope(
            "Aquarius",
            "Your humanitarian instincts guide you toward meaningful action. Group projects thrive under your unconventional leadership. Unexpected connections prove valuable.",
            "Independence and togetherness can coexist. Find your balance.",
            "Networking in unexpected places leads to opportunities.",
            22, "Violet", "Gemini", "Visionary",
            "Saturn grounds your visionary nature while Uranus sparks innovation. You're uniquely positioned to build bridges between tradition and revolution—be the change you envision.",
        ),
    ),
    "Pisces": (
        Horoscope(
            "Pisces",
            "Neptune enhances your already powerful intuition. Dreams carry important messages—pay attention. Creative and spiritual pursuits bring deep fulfillment. Your compassion heals others.",
            "Soulmate connections deepen. Trust the universe's timing.",
            "Artistic and healing professions are especially favored.",
            12, "Sea Green", "Scorpio", "Dreamy",
            "Neptune, your mystical ruler, opens portals to the divine. Your dreams are messages from the cosmos—keep a journal by your bed and let your imagination guide you to hidden treasures.",
        ),
        Horoscope(
            "Pisces",
            "Your empathic abilities are heightened. Remember to protect your energy while helping others. Water activities bring peace and clarity. A creative breakthrough is possible.",
            "Romantic idealism meets reality. Accept loved ones as they are.",
            "Trust your creative instincts. They lead to success.",
            7, "Ocean Blue", "Cancer", "Intuitive",
            "Venus blesses Neptune with artistic grace, turning your inner visions into tangible beauty. Create without judgment—your sensitivity transforms raw emotion into art that touches souls.",
        ),
    ),
}


WEEKLY_TRANSITS: Tuple[Tuple[PlanetaryTransit, ...], ...] = (
    (
        PlanetaryTransit(
            "Venus", "♀️", "trine Neptune",
            "Venus forms a gentle trine with Neptune, heightening creativity and romantic sensitivity.",
            "Express love through art, music, or heartfelt gestures. Your imagination is a powerful connector.",
        ),
        PlanetaryTransit(
            "Mercury", "☿️", "conjunct Sun",
            "Mercury aligns with the Sun, sharpening your mental clarity and communication.",
            "Speak your truth with confidence. Important conversations are favored now.",
        ),
    ),
    (
        PlanetaryTransit(
            "Mars", "♂️", "sextile Jupiter",
            "Mars harmonizes with Jupiter, fueling ambition and expanding opportunities for action.",
            "Take bold steps toward your goals. Fortune favors the courageous this week.",
        ),
        PlanetaryTransit(
            "Venus", "♀️", "entering Taurus",
            "Venus enters her home sign of Taurus, emphasizing comfort, beauty, and sensual pleasures.",
            "Indulge in life's simple pleasures. Treat yourself and loved ones with care.",
        ),
    ),
    (
        PlanetaryTransit(
            "Mercury", "☿️", "trine Saturn",
            "Mercury trines Saturn, bringing structure to your thoughts and grounding your ideas.",
            "Plan for the long term. Your words carry weight—use them wisely.",
        ),
        PlanetaryTransit(
            "Sun", "☀️", "square Pluto",
            "The Sun squares Pluto, intensifying power dynamics and urging transformation.",
            "Face what you've been avoiding. True empowerment comes through authenticity.",
        ),
    ),
    (
        PlanetaryTransit(
            "Venus", "♀️", "sextile Mars",
            "Venus and Mars dance in harmony, igniting passion and creative energy.",
            "Pursue what you desire with grace. Balance assertion with receptivity.",
        ),
        PlanetaryTransit(
            "Jupiter", "♃", "trine Moon",
            "Jupiter trines the Moon, expanding emotional wisdom and bringing good fortune.",
            "Trust your instincts—they're aligned with abundance right now.",
        ),
    ),
    (
        PlanetaryTransit(
            "Mercury", "☿️", "opposite Uranus",
            "Mercury opposes Uranus, bringing unexpected insights and surprising news.",
            "Stay flexible in your thinking. Breakthroughs come from unexpected directions.",
        ),
        PlanetaryTransit(
            "Mars", "♂️", "conjunct North Node",
            "Mars aligns with the North Node, energizing your life purpose and destiny.",
            "Take action on your soul's calling. Courage moves you toward your fate.",
        ),
    ),
)


TRANSIT_FLAVOR: Dict[str, str] = {
    "Venus": "a touch of grace and beauty to your connections",
    "Mars": "dynamic energy to fuel your ambitions",
    "Mercury": "clarity to your thoughts and communications",
    "Jupiter": "expansion and optimism to your outlook",
    "Saturn": "structure and wisdom to your endeavors",
    "Sun": "illumination to your path forward",
}
DEFAULT_TRANSIT_FLAVOR = "cosmic support to your journey"

# element -> (advice when the sky favours it, advice otherwise)
ELEMENT_ADVICE: Dict[str, Tuple[str, str]] = {
    "Fire": (
        "Channel this luminous energy into creative expression. Your passion can inspire others—share it generously.",
        "Honor your need for action while staying grounded. Small, intentional steps lead to lasting victories.",
    ),
    "Earth": (
        "Plant seeds for practical goals now. Your steady approach transforms dreams into reality.",
        "Appreciate the tangible progress you've made. Celebrate small wins and nurture what you've built.",
    ),
    "Air": (
        "Your intellectual insights are especially sharp. Share your ideas—they're meant to circulate and connect.",
        "Balance mental activity with moments of stillness. Your best insights come when you give your mind space to breathe.",
    ),
    "Water": (
        "Your emotional antennae are finely tuned. Trust your intuition—it's your most reliable guide right now.",
        "Honor your sensitivity as a superpower. Create sacred space for emotional processing and self-care.",
    ),
}
