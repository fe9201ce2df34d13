from unittest import TestCase
from tokenledger.execution.runtime import Context, empty_context


class TestContext(TestCase):
    def test_get_state(self):
        c = Context(base_state={'caller': 'stu'})

        self.assertEqual(c._get_state(), c._base_state)

    def test_get_state_after_added_state(self):
        c = Context(base_state={'caller': 'stu'})

        new_state = {'caller': 'stuart'}

        c._add_state(new_state)

        self.assertEqual(c._get_state(), new_state)
        self.assertEqual(c.caller, 'stuart')

    def test_pop_state_doesnt_fail_if_none_added(self):
        c = empty_context()

        c._pop_state()

        self.assertEqual(c._get_state(), c._base_state)
        self.assertIsNone(c.caller)

    def test_pop_state_restores_previous_caller(self):
        c = Context(base_state={'caller': 'stu'})

        c._add_state({'caller': 'colin'})
        c._pop_state()

        self.assertEqual(c.current_caller(), 'stu')

    def test_add_state_respects_max_length(self):
        c = Context(base_state={'caller': None}, maxlen=2)

        for i in range(5):
            c._add_state({'caller': i})

        self.assertEqual(len(c._state), 2)
        self.assertEqual(c.caller, 1)

    def test_set_base_state_resets_stack(self):
        c = empty_context()
        c._add_state({'caller': 'x'})

        c.set_base_state(caller='stu')

        self.assertEqual(c.caller, 'stu')
        self.assertListEqual(c._state, [])
