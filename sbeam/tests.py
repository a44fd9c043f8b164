import math
from itertools import product
from unittest import TestCase

import matplotlib
import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from sbeam.core import defaults
from sbeam.core.calc_methods.allowable_stress import (
    allowable_stress, AllowableStress
)
from sbeam.core.calc_methods.load_case import (
    AppliedMomentCase, CantileverPointLoadCase, CentralPointLoadCase,
    evaluate, load_case, TrapezoidLoadCase
)
from sbeam.core.exceptions import (
    InvalidGeometry, MalformedInput, MissingInput, SBeamError
)
from sbeam.core.postprocessing.plot import (
    plot_cross_section, plot_moment_diagram
)
from sbeam.core.postprocessing.results import AnalysisResult, MomentDiagram
from sbeam.core.preprocessing.cross_section import (
    BoxShape, build_section, HShape, LShape, section_profile, SectionKind,
    SectionParameters
)
from sbeam.core.preprocessing.loads import (
    AppliedMoment, CantileverPointLoad, CentralPointLoad, LoadCaseKind,
    TrapezoidLoad
)

matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


H_GEOMETRY = dict(width=200, height=400, web_thickness=8,
                  flange_thickness=13, yield_stress=235, length=6300)
H_IY = 1 / 12 * 200 * 400 ** 3 - 1 / 12 * 192 * 374 ** 3


class TestSectionParameters(TestCase):

    def test_validation(self):
        with self.assertRaises(InvalidGeometry):
            SectionParameters(0, 6300, 235, 1e8, 5e5, 1)
        with self.assertRaises(InvalidGeometry):
            SectionParameters(400, 6300, 235, 1e8, 5e5, 1,
                              torsional_radius=-1)
        with self.assertRaises(MissingInput):
            SectionParameters(400, None, 235, 1e8, 5e5, 1)
        with self.assertRaises(MissingInput):
            SectionParameters(400, 6300, 235, 1e8, 5e5, None)

    def test_non_numeric(self):
        with self.assertRaises(MalformedInput):
            SectionParameters('400', 6300, 235, 1e8, 5e5, 1)
        with self.assertRaises(MalformedInput):
            SectionParameters(400, 6300, 235, 1e8, 5e5, 'x')
        with self.assertRaises(MalformedInput):
            SectionParameters(400, 6300, 235, 1e8, 5e5, 1, flange_area=True)

    def test_section_modulus(self):
        p = SectionParameters(400, 6300, 235, 1e8, 5e5, 1)
        self.assertEqual(p.section_modulus, p.mom_of_int / (p.height / 2))
        for zy in (1.0, 5e5 * (1 + 1e-6), 1e6):
            with self.assertRaises(
                    MalformedInput,
                    msg='Zy must equal Iy / (H / 2) within 1e-9 relative.'
            ):
                SectionParameters(400, 6300, 235, 1e8, zy, 1)
        with self.assertRaises(MalformedInput):
            SectionParameters.from_vector([400, 6300, 235, 1e8, 1.0, 1,
                                           0, 0, 0])

    def test_buckling_terms(self):
        h = build_section('h', H_GEOMETRY).vector
        for index in (6, 7, 8):
            vector = list(h)
            vector[index] = 0.0
            with self.subTest(index=index):
                with self.assertRaises(
                        InvalidGeometry,
                        msg='The H rule divides by i_t, lambda and Af.'
                ):
                    SectionParameters.from_vector(vector)
        with self.assertRaises(InvalidGeometry):
            SectionParameters(400, 6300, 235, 1e8, 5e5, 0)

        for index in (6, 8):
            vector = list(h)
            vector[5] = 2
            vector[index] = 0.0
            with self.subTest(kind=2, index=index):
                with self.assertRaises(InvalidGeometry):
                    SectionParameters.from_vector(vector)
        vector = list(h)
        vector[5], vector[7] = 2, 0.0
        self.assertEqual(
            SectionParameters.from_vector(vector).slenderness, 0.0,
            'The L rule does not use the slenderness.'
        )

        box = SectionParameters.from_vector([400, 6300, 235, 1e8, 5e5, 1,
                                             0, 0, 0])
        self.assertEqual(allowable_stress(box, 0.0), 235 / 1.5)
        unknown = SectionParameters(400, 6300, 235, 1e8, 5e5, 99)
        self.assertEqual(allowable_stress(unknown, 0.0), 0.0)

    def test_section_kind(self):
        p = SectionParameters(400, 6300, 235, 1e8, 5e5, 2.0,
                              torsional_radius=20, flange_area=1000)
        self.assertIs(p.section_kind, SectionKind.L_SHAPE_ASYMMETRIC)
        self.assertTrue(p.is_recognized)
        p = SectionParameters(400, 6300, 235, 1e8, 5e5, 99)
        self.assertEqual(p.section_kind, 99)
        self.assertFalse(
            p.is_recognized,
            'Unknown section kind codes must be kept, not rejected.'
        )

    def test_vector(self):
        p = build_section('h', H_GEOMETRY)
        self.assertEqual(len(p.vector), 9)
        self.assertEqual(
            SectionParameters.from_vector(p.vector), p,
            'Converting to the flat vector and back must not lose any '
            'information.'
        )
        extended = list(p.vector) + [1.0, 2.0]
        self.assertEqual(SectionParameters.from_vector(extended), p,
                         'Trailing entries of the vector are ignored.')

    def test_from_vector_errors(self):
        with self.assertRaises(MissingInput):
            SectionParameters.from_vector(None)
        with self.assertRaises(MalformedInput):
            SectionParameters.from_vector([400, 6300, 235, 1e8, 1e6])
        with self.assertRaises(MalformedInput):
            SectionParameters.from_vector(np.ones((3, 3)))
        with self.assertRaises(MalformedInput):
            SectionParameters.from_vector(['a'] * 9)


class TestHShape(TestCase):

    def test_parameters(self):
        p = HShape(**H_GEOMETRY).parameters
        assert_allclose(p.mom_of_int, H_IY)
        assert_allclose(p.mom_of_int, 229648682.6667)
        assert_allclose(
            p.section_modulus, p.mom_of_int / (p.height / 2),
            err_msg='The section modulus must equal Iy / (H / 2).'
        )
        num = 13 * 200 ** 3 + (400 / 6 - 13) * 8 ** 3
        den = 12 * (13 * 200 + (400 / 6 - 13) * 8)
        assert_allclose(p.torsional_radius, math.sqrt(num / den))
        assert_allclose(p.slenderness, 1500 / math.sqrt(235 / 1.5))
        assert_allclose(p.flange_area, 2600)
        self.assertIs(p.section_kind, SectionKind.H_STRONG_AXIS)
        self.assertEqual(p.height, 400)
        self.assertEqual(p.length, 6300)
        self.assertEqual(p.yield_stress, 235)

    def test_section_modulus(self):
        for b, h, (tw, tf) in product(
                (100, 200, 300), (200, 400, 900),
                ((6, 9), (8, 13), (12, 20))
        ):
            p = HShape(b, h, tw, tf, 235, 5000).parameters
            assert_allclose(
                p.section_modulus, p.mom_of_int / (h / 2),
                err_msg=f'Zy = Iy / (H / 2) must hold for B={b}, H={h}, '
                f'tw={tw}, tf={tf}.'
            )

    def test_invalid_geometry(self):
        for name in H_GEOMETRY:
            for value in (0, -10, float('nan')):
                with self.subTest(name=name, value=value):
                    with self.assertRaises(InvalidGeometry):
                        HShape(**{**H_GEOMETRY, name: value})
            with self.subTest(name=name, value=None):
                with self.assertRaises(MissingInput):
                    HShape(**{**H_GEOMETRY, name: None})
        with self.assertRaises(MalformedInput):
            HShape(**{**H_GEOMETRY, 'height': '400'})

    def test_degenerate_torsional_radius(self):
        # H / 6 - tf = -3 and B = 3 cancel in the denominator.
        with self.assertRaises(InvalidGeometry):
            HShape(3, 12, 5, 5, 235, 1000)

    def test_negative_torsional_radicand(self):
        # Denominator 12 * (50 - 42) > 0, numerator 5000 - 3 * 14 ** 3 < 0.
        with self.assertRaises(InvalidGeometry):
            HShape(10, 12, 14, 5, 235, 1000)

    def test_error_logged(self):
        with self.assertLogs(
                'sbeam.core.preprocessing.cross_section.HShape', 'ERROR'
        ):
            with self.assertRaises(InvalidGeometry):
                HShape(**{**H_GEOMETRY, 'height': -400})

    def test_debug(self):
        with self.assertLogs(
                'sbeam.core.preprocessing.cross_section.HShape', 'DEBUG'
        ) as cm:
            HShape(**H_GEOMETRY, debug=True)
        self.assertTrue(
            any('Section parameters' in line for line in cm.output),
            'With debug=True the derived parameters must be logged.'
        )

    def test_outline(self):
        section = HShape(**H_GEOMETRY)
        assert_allclose(section.outline.area, 2 * 200 * 13 + 8 * 374)
        assert_allclose(section.outline.bounds, (-100, -200, 100, 200))


class TestLShape(TestCase):

    def test_parameters(self):
        h = HShape(**defaults.L_SHAPE_DEFAULTS).parameters
        p = LShape(**defaults.L_SHAPE_DEFAULTS).parameters
        self.assertIs(p.section_kind, SectionKind.L_SHAPE_ASYMMETRIC)
        for name in ('mom_of_int', 'section_modulus', 'torsional_radius',
                     'slenderness', 'flange_area'):
            assert_allclose(
                getattr(p, name), getattr(h, name),
                err_msg=f'The L shape uses the H shape formula for {name}.'
            )

    def test_outline(self):
        section = LShape(**defaults.L_SHAPE_DEFAULTS)
        assert_allclose(section.outline.area, 75 * 9 + 9 * 66)


class TestBoxShape(TestCase):

    def test_parameters(self):
        p = BoxShape(**defaults.BOX_SHAPE_DEFAULTS).parameters
        iy = (150 * 150 ** 3 - 144 * 144 ** 3) / 12
        assert_allclose(p.mom_of_int, iy)
        assert_allclose(p.section_modulus, iy / 75)
        self.assertIs(p.section_kind, SectionKind.BOX_OR_ROUND)
        self.assertEqual(
            (p.torsional_radius, p.slenderness, p.flange_area), (0, 0, 0),
            'Box sections do not use the torsion terms.'
        )

    def test_thickness(self):
        for t in (150, 200):
            with self.assertRaises(InvalidGeometry):
                BoxShape(150, 150, t, 235, 3200)
        with self.assertRaises(InvalidGeometry):
            BoxShape(300, 100, 120, 235, 3200)

    def test_outline(self):
        section = BoxShape(**defaults.BOX_SHAPE_DEFAULTS)
        assert_allclose(section.outline.area, 150 ** 2 - 138 ** 2)
        self.assertEqual(len(section.outline.interiors), 1)


class TestBuildSection(TestCase):

    def test_families(self):
        self.assertEqual(build_section('h', H_GEOMETRY),
                         HShape(**H_GEOMETRY).parameters)
        self.assertEqual(build_section('L', defaults.L_SHAPE_DEFAULTS),
                         LShape(**defaults.L_SHAPE_DEFAULTS).parameters)
        self.assertEqual(build_section('round', defaults.BOX_SHAPE_DEFAULTS),
                         build_section('box', defaults.BOX_SHAPE_DEFAULTS))
        self.assertIsInstance(section_profile('box',
                                              defaults.BOX_SHAPE_DEFAULTS),
                              BoxShape)

    def test_errors(self):
        with self.assertRaises(InvalidGeometry):
            build_section('t', H_GEOMETRY)
        with self.assertRaises(MissingInput):
            build_section('h', None)
        geometry = dict(H_GEOMETRY)
        del geometry['flange_thickness']
        with self.assertRaises(MissingInput):
            build_section('h', geometry)
        with self.assertRaises(MalformedInput):
            build_section('box', {**defaults.BOX_SHAPE_DEFAULTS, 'radius': 5})

    def test_error_hierarchy(self):
        for error in (InvalidGeometry, MissingInput, MalformedInput):
            self.assertTrue(issubclass(error, SBeamError))
            self.assertTrue(issubclass(error, ValueError))


class TestAllowableStress(TestCase):

    def setUp(self):
        self.h = build_section('h', H_GEOMETRY)
        self.l_ = build_section('l', defaults.L_SHAPE_DEFAULTS)
        self.box = build_section('box', defaults.BOX_SHAPE_DEFAULTS)

    def test_h_without_buckling_length(self):
        self.assertEqual(
            allowable_stress(self.h, 0.0), 235 / 1.5,
            'Without buckling length the H shape gets exactly F / 1.5.'
        )

    def test_h_with_buckling_length(self):
        fb = AllowableStress(self.h, 8000)
        self.assertLess(fb.lateral_buckling, fb.flange_buckling)
        assert_allclose(fb.value, 89000 / (8000 * 400 / 2600))
        assert_allclose(allowable_stress(self.h, 1000), 235 / 1.5,
                        err_msg='Short buckling lengths are capped.')
        i_t, lam = self.h.torsional_radius, self.h.slenderness
        fb1 = (1 - 0.4 * (20000 / i_t) ** 2 / (2.0 * lam ** 2)) * 235 / 1.5
        fb2 = 89000 / (20000 * 400 / 2600)
        assert_allclose(AllowableStress(self.h, 20000, 2.0).value,
                        min(max(fb1, fb2), 235 / 1.5))

    def test_box(self):
        for lb in (0.0, 3200.0, 10000.0):
            self.assertEqual(
                allowable_stress(self.box, lb), 235 / 1.5,
                'Box sections are never reduced for buckling.'
            )

    def test_l_shape(self):
        self.assertEqual(allowable_stress(self.l_, 0.0), 235 / 1.5)
        assert_allclose(allowable_stress(self.l_, 3000.0), 235 / 1.5)
        assert_allclose(allowable_stress(self.l_, 10000.0),
                        89000 / (10000 * 75 / 675))

    def test_unrecognized_kind(self):
        vector = list(self.h.vector)
        vector[5] = 99
        p = SectionParameters.from_vector(vector)
        with self.assertLogs(
            'sbeam.core.calc_methods.allowable_stress.AllowableStress',
            'WARNING'
        ):
            self.assertEqual(allowable_stress(p, 0.0), 0.0)


class TestLoadInputs(TestCase):

    def test_defaults(self):
        load = CentralPointLoad(100)
        self.assertEqual(load.buckling_length, 0.0)
        self.assertEqual(load.young_mod, 205000.0)
        self.assertEqual(TrapezoidLoad(10).width, 1800.0)
        assert_allclose(TrapezoidLoad(10).line_load, 18.0)

    def test_validation(self):
        with self.assertRaises(MissingInput):
            CentralPointLoad(None)
        with self.assertRaises(MissingInput):
            CantileverPointLoad(100, buckling_length=None)
        with self.assertRaises(MalformedInput):
            CentralPointLoad('100')
        with self.assertRaises(MalformedInput):
            CentralPointLoad(float('inf'))
        with self.assertRaises(MalformedInput):
            CentralPointLoad(100, buckling_length=-1)
        with self.assertRaises(MalformedInput):
            AppliedMoment(10, young_mod=0)
        with self.assertRaises(MalformedInput):
            TrapezoidLoad(10, width=0)

    def test_from_mapping(self):
        self.assertEqual(CentralPointLoad.from_mapping({'load': 50}),
                         CentralPointLoad(50))
        with self.assertRaises(MissingInput):
            CentralPointLoad.from_mapping({})
        with self.assertRaises(MissingInput):
            CentralPointLoad.from_mapping(None)
        with self.assertRaises(MalformedInput):
            CentralPointLoad.from_mapping({'load': 50, 'span': 3})

    def test_kind(self):
        self.assertIs(LoadCaseKind.parse('central'),
                      LoadCaseKind.CENTRAL_POINT)
        self.assertIs(LoadCaseKind.parse('Trapezoid'),
                      LoadCaseKind.TRAPEZOID)
        self.assertIs(LoadCaseKind.parse('APPLIED_MOMENT'),
                      LoadCaseKind.APPLIED_MOMENT)
        with self.assertRaises(MissingInput):
            LoadCaseKind.parse(None)
        with self.assertRaises(MalformedInput):
            LoadCaseKind.parse('wind')


class TestCentralPointLoad(TestCase):

    def setUp(self):
        self.p = build_section('h', H_GEOMETRY)
        self.result = evaluate('central', self.p, CentralPointLoad(100))

    def test_result(self):
        r = self.result
        self.assertIs(r.load_case, LoadCaseKind.CENTRAL_POINT)
        assert_allclose(r.moment, 157.5)
        assert_allclose(r.stress, 157.5e6 / self.p.section_modulus)
        assert_allclose(r.deflection,
                        100 * 1000 * 6300 ** 3 / (48 * 205000 * H_IY))
        self.assertEqual(r.allowable_stress, 235 / 1.5)
        assert_allclose(r.ratio, r.stress / (235 / 1.5))
        self.assertTrue(r.passed)

    def test_diagram(self):
        d = self.result.diagram
        assert_allclose(d.samples, (0, 78.75, 157.5, 78.75, 0))
        self.assertEqual(d.span, 6300)
        self.assertEqual(d.values, d.samples + (6300.0,))
        assert_allclose(d.stations, (0, 1575, 3150, 4725, 6300))
        self.assertEqual(d.max_abs, 157.5)

    def test_idempotence(self):
        self.assertEqual(
            evaluate('central', self.p, CentralPointLoad(100)), self.result,
            'Repeated evaluation must give identical results.'
        )
        case = CentralPointLoadCase(self.p, CentralPointLoad(100))
        self.assertEqual(case.result, case.result)
        self.assertEqual(case.result, self.result)

    def test_round_trip(self):
        for params in (self.p, list(self.p.vector), np.array(self.p.vector)):
            r = evaluate('central', params, {'load': 100})
            self.assertEqual(
                r, self.result,
                'The parameter record must carry everything the evaluator '
                'needs.'
            )

    def test_buckling_length(self):
        r = evaluate('central', self.p,
                     CentralPointLoad(100, buckling_length=8000))
        assert_allclose(r.allowable_stress, 89000 / (8000 * 400 / 2600))
        self.assertGreater(r.ratio, 1)
        self.assertFalse(r.passed)

    def test_unrecognized_kind(self):
        vector = list(self.p.vector)
        vector[5] = 99
        r = evaluate('central', vector, CentralPointLoad(100))
        self.assertEqual(r.allowable_stress, 0.0)
        self.assertTrue(math.isinf(r.ratio) and r.ratio > 0,
                        'A zero allowable stress must give ratio +inf.')
        self.assertFalse(r.passed)
        assert_allclose(r.moment, 157.5)

    def test_errors(self):
        with self.assertRaises(MissingInput):
            evaluate('central', None, CentralPointLoad(100))
        with self.assertRaises(MissingInput):
            evaluate('central', self.p, None)
        with self.assertRaises(MissingInput):
            evaluate('central', self.p, {'load': None})
        with self.assertRaises(MissingInput):
            evaluate(None, self.p, CentralPointLoad(100))
        with self.assertRaises(MalformedInput):
            evaluate('central', [400, 6300, 235], CentralPointLoad(100))
        with self.assertRaises(MalformedInput):
            evaluate('central', self.p, TrapezoidLoad(10))
        with self.assertRaises(MalformedInput):
            evaluate('wind', self.p, CentralPointLoad(100))
        with self.assertRaises(MalformedInput):
            CentralPointLoadCase(self.p, CantileverPointLoad(100))

    def test_summary(self):
        text = self.result.summary()
        for token in ('CENTRAL_POINT', 'Sig/fb', '157.5', 'OK'):
            self.assertIn(token, text)


class TestTrapezoidLoad(TestCase):

    def setUp(self):
        self.p = build_section('h', H_GEOMETRY)

    def test_result(self):
        case = load_case('trapezoid', self.p, TrapezoidLoad(10, width=1800))
        self.assertIsInstance(case, TrapezoidLoadCase)
        q, l_, dw = 18.0, 6300.0, 1800.0
        assert_allclose(case.reaction, q * (l_ - dw) / 2)
        assert_allclose(case.moment, 79.5825)
        assert_allclose(case.quarter_moment,
                        (40500 * 1575 - q * 1575 ** 3 / (6 * dw)) / 1e6)
        assert_allclose(
            case.deflection,
            q / (1920 * 205000 * H_IY) * (5 * l_ ** 2 - 4 * dw ** 2) ** 2
        )
        mx = case.quarter_moment
        assert_allclose(case.diagram.samples, (0, mx, 79.5825, mx, 0))
        assert_allclose(case.stress, 79.5825e6 / self.p.section_modulus)

    def test_wide_load(self):
        with self.assertLogs(
            'sbeam.core.calc_methods.load_case.TrapezoidLoadCase', 'WARNING'
        ):
            TrapezoidLoadCase(self.p, TrapezoidLoad(10, width=4000))


class TestCantileverPointLoad(TestCase):

    def test_result(self):
        p = build_section('h', H_GEOMETRY)
        case = load_case(LoadCaseKind.CANTILEVER_POINT, p,
                         CantileverPointLoad(100))
        self.assertIsInstance(case, CantileverPointLoadCase)
        assert_allclose(case.moment, 630.0)
        assert_allclose(case.deflection,
                        100 / 1000 * 6300 ** 3 / (3 * 205000 * H_IY))

    def test_diagram(self):
        p = build_section('box', defaults.BOX_SHAPE_DEFAULTS)
        for load in (1.0, 37.3, 250.0):
            d = evaluate('cantilever', p, CantileverPointLoad(load)).diagram
            m = load * 3.2
            assert_allclose(d.samples, (-m, -m * 3 / 4, -m / 2, -m / 4, 0))
            assert_allclose(
                np.diff(d.samples), [m / 4] * 4,
                err_msg='The cantilever diagram is an arithmetic '
                'progression from -M to 0.'
            )


class TestAppliedMoment(TestCase):

    def test_result(self):
        p = build_section('box', defaults.BOX_SHAPE_DEFAULTS)
        case = load_case('moment', p, {'moment': 12.5,
                                       'buckling_length': 10000})
        self.assertIsInstance(case, AppliedMomentCase)
        r = case.result
        self.assertEqual(r.deflection, 0.0)
        assert_allclose(r.diagram.samples, (12.5,) * 5)
        assert_allclose(r.stress, 12.5e6 / p.section_modulus)
        self.assertEqual(r.allowable_stress, 235 / 1.5)


class TestMomentDiagram(TestCase):

    def test_values(self):
        d = MomentDiagram((0, 1, 2, 1, 0), 4000)
        self.assertEqual(MomentDiagram.from_values(d.values), d)
        with self.assertRaises(MalformedInput):
            MomentDiagram((0, 1, 2, 1), 4000)
        with self.assertRaises(MalformedInput):
            MomentDiagram.from_values((0, 1, 2, 1, 0))
        with self.assertRaises(MissingInput):
            MomentDiagram.from_values(None)

    def test_check_ratio(self):
        self.assertEqual(AnalysisResult.check_ratio(10.0, 0.0), math.inf)
        self.assertEqual(AnalysisResult.check_ratio(-10.0, 0.0), -math.inf)
        self.assertTrue(math.isnan(AnalysisResult.check_ratio(0.0, 0.0)))
        self.assertEqual(AnalysisResult.check_ratio(10.0, 20.0), 0.5)


class TestPlot(TestCase):

    def tearDown(self):
        plt.close('all')

    def test_moment_diagram(self):
        p = build_section('h', H_GEOMETRY)
        r = evaluate('central', p, CentralPointLoad(100))
        ax = plot_moment_diagram(r.diagram)
        self.assertEqual(len(ax.patches), 1)
        self.assertEqual(len(ax.texts), 5)
        assert_allclose(ax.lines[-1].get_ydata(),
                        -10.0 * np.array(r.diagram.samples),
                        err_msg='Sagging moments are drawn below the axis, '
                        'scaled by 10 unless another scale is given.')
        ax = plot_moment_diagram(r.diagram.values, scale=2.0)
        assert_allclose(ax.lines[-1].get_ydata(),
                        -2.0 * np.array(r.diagram.samples))

    def test_zero_diagram(self):
        ax = plot_moment_diagram(MomentDiagram((0,) * 5, 1000))
        self.assertEqual(len(ax.patches), 0)
        self.assertEqual(len(ax.texts), 0)

    def test_cross_section(self):
        fig, ax = plt.subplots()
        self.assertIs(
            plot_cross_section(BoxShape(**defaults.BOX_SHAPE_DEFAULTS), ax),
            ax
        )
        self.assertEqual(len(ax.patches), 2)
        ax = plot_cross_section(HShape(**H_GEOMETRY))
        self.assertGreaterEqual(len(ax.patches), 1)
